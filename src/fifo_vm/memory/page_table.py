"""Page table — residency state for every virtual page.

The page table is the kernel's answer to "where does this page live?"
Each virtual page number (0 .. num_pages-1) owns exactly one
``PageTableEntry``.  An entry is either:

    - **resident** — the page occupies a physical frame, and ``frame``
      says which one.
    - **non-resident** — the page lives only on (simulated) disk, and
      ``frame`` is ``None``.

The table holds no policy.  It never decides *which* page to evict;
it only records the decisions the replacement engine makes, and
refuses transitions that would leave it inconsistent.

Design choices:
    - **List of entries, indexed by page** — the address space is small
      and dense, so a list beats a dict.
    - **dirty bit kept but dormant** — real page tables track writes so
      clean pages can be dropped without a write-back.  Nothing in this
      simulator sets it.
"""

from dataclasses import dataclass

from fifo_vm.errors import (
    InvalidConfigurationError,
    InvalidReferenceError,
    InvalidStateError,
)


@dataclass
class PageTableEntry:
    """Residency record for one virtual page.

    Attributes:
        resident: True iff the page currently occupies a frame.
        frame: The frame holding the page, or None when not resident.
        dirty: Reserved for write-back semantics; never set.

    """

    resident: bool = False
    frame: int | None = None
    dirty: bool = False


class PageTable:
    """Map each virtual page number to its residency state."""

    def __init__(self, num_pages: int) -> None:
        """Create a table with every page non-resident.

        Args:
            num_pages: Size of the virtual address space in pages.

        Raises:
            InvalidConfigurationError: If num_pages is not positive.

        """
        if num_pages <= 0:
            msg = f"Number of pages must be positive (got {num_pages})"
            raise InvalidConfigurationError(msg)
        self._entries = [PageTableEntry() for _ in range(num_pages)]

    @property
    def num_pages(self) -> int:
        """Return the size of the virtual address space."""
        return len(self._entries)

    def _check(self, page: int) -> PageTableEntry:
        if isinstance(page, bool) or not isinstance(page, int):
            msg = f"Not an integer page number: {page!r}"
            raise InvalidReferenceError(msg)
        if not 0 <= page < len(self._entries):
            msg = f"Page {page} outside address space [0, {len(self._entries) - 1}]"
            raise InvalidReferenceError(msg)
        return self._entries[page]

    def entry(self, page: int) -> PageTableEntry:
        """Return the entry for a page (read it, don't mutate it)."""
        return self._check(page)

    def is_resident(self, page: int) -> bool:
        """Return True if the page currently occupies a frame."""
        return self._check(page).resident

    def frame_of(self, page: int) -> int:
        """Return the frame holding a resident page.

        Raises:
            InvalidStateError: If the page is not resident.

        """
        entry = self._check(page)
        if not entry.resident or entry.frame is None:
            msg = f"Page {page} is not resident"
            raise InvalidStateError(msg)
        return entry.frame

    def mark_resident(self, page: int, frame: int) -> None:
        """Record that a page now lives in the given frame.

        Raises:
            InvalidStateError: If the page is already resident elsewhere.

        """
        entry = self._check(page)
        if entry.resident and entry.frame != frame:
            msg = f"Page {page} already resident in frame {entry.frame}, not {frame}"
            raise InvalidStateError(msg)
        entry.resident = True
        entry.frame = frame

    def mark_evicted(self, page: int) -> None:
        """Record that a resident page has been swapped out.

        Raises:
            InvalidStateError: If the page was not resident.

        """
        entry = self._check(page)
        if not entry.resident:
            msg = f"Cannot evict page {page}: not resident"
            raise InvalidStateError(msg)
        entry.resident = False
        entry.frame = None

    def resident_pages(self) -> dict[int, int]:
        """Return a page → frame mapping of every resident page."""
        return {
            page: entry.frame
            for page, entry in enumerate(self._entries)
            if entry.resident and entry.frame is not None
        }

    def __len__(self) -> int:
        """Return the number of resident pages."""
        return sum(1 for entry in self._entries if entry.resident)

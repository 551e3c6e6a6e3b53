"""FIFO eviction queue — load order of resident pages.

FIFO replacement evicts the page that has been resident the longest.
The queue records one ``(frame, page)`` pair per resident page in the
order the pages were loaded:

    head (oldest, next victim) ... tail (most recently loaded)

Hits never touch the queue.  That is the whole difference between
FIFO and LRU: a page loaded early stays at the head no matter how
often it is used afterwards.

Why an OrderedDict instead of a linked list?
    Removal by page must work anywhere in the queue, not just at the
    head.  An ``OrderedDict`` keyed by page gives O(1) append, O(1)
    pop from the front, and O(1) removal by key, while keeping
    insertion order for the rest.  No node bookkeeping is needed.
"""

from collections import OrderedDict
from collections.abc import Iterator

from fifo_vm.errors import EmptyQueueError


class FIFOEvictionQueue:
    """Ordered (frame, page) records, oldest first."""

    def __init__(self) -> None:
        """Create an empty queue."""
        # page → frame, in load order
        self._order: OrderedDict[int, int] = OrderedDict()

    def push_tail(self, frame: int, page: int) -> None:
        """Append a newly loaded page at the tail.

        Raises:
            ValueError: If the page is already queued.

        """
        if page in self._order:
            msg = f"Page {page} is already queued (frame {self._order[page]})"
            raise ValueError(msg)
        self._order[page] = frame

    def pop_head(self) -> tuple[int, int]:
        """Remove and return the oldest ``(frame, page)`` pair.

        Raises:
            EmptyQueueError: If the queue is empty.

        """
        if not self._order:
            msg = "No pages to evict"
            raise EmptyQueueError(msg)
        page, frame = self._order.popitem(last=False)
        return frame, page

    def peek_head(self) -> tuple[int, int] | None:
        """Return the next victim without removing it, or None if empty."""
        if not self._order:
            return None
        page = next(iter(self._order))
        return self._order[page], page

    def remove_by_page(self, page: int) -> bool:
        """Drop a page's entry wherever it sits in the queue.

        The relative order of the remaining entries is preserved.

        Returns:
            True if an entry was removed, False if the page wasn't queued.

        """
        return self._order.pop(page, None) is not None

    def contains_page(self, page: int) -> bool:
        """Return True if the page has an entry in the queue."""
        return page in self._order

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield ``(frame, page)`` pairs from head to tail."""
        for page, frame in self._order.items():
            yield frame, page

    def __len__(self) -> int:
        """Return the number of queued pages."""
        return len(self._order)

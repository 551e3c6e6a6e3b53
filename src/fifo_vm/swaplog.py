"""Swap log — the simulated disk that evicted pages are written to.

A real OS writes an evicted page's contents to a swap partition.  We
only write a line saying that it happened:

    Step 5: swapped out page 0 from frame 0

``FileSwapLog`` opens, appends, and closes the file for every record,
so the log is complete even if the run aborts halfway.  It lets
``OSError`` propagate; the engine catches it and logs a warning, so an
unwritable log never changes the simulation's outcome.

``MemorySwapLog`` keeps records in a list, for tests and the web API.
"""

from pathlib import Path

from fifo_vm.events import SwapRecord

HEADER = "=== Swap simulated log ==="


def format_record(swap: SwapRecord) -> str:
    """Render a swap record as one human-readable line."""
    return f"Step {swap.step}: swapped out page {swap.page} from frame {swap.frame}"


class FileSwapLog:
    """Append-only swap log backed by a text file."""

    def __init__(self, path: Path) -> None:
        """Create a log that writes to *path* (nothing is opened yet)."""
        self._path = path

    @property
    def path(self) -> Path:
        """Return the log file path."""
        return self._path

    def reset(self) -> None:
        """Truncate the file and write the header line.

        Raises:
            OSError: If the file cannot be written.

        """
        self._path.write_text(HEADER + "\n")

    def record(self, swap: SwapRecord) -> None:
        """Append one swap-out line.

        Raises:
            OSError: If the file cannot be opened or written.

        """
        with self._path.open("a") as f:
            f.write(format_record(swap) + "\n")


class MemorySwapLog:
    """Swap log that keeps records in memory."""

    def __init__(self) -> None:
        """Create an empty log."""
        self._records: list[SwapRecord] = []

    @property
    def records(self) -> list[SwapRecord]:
        """Return all records in eviction order."""
        return list(self._records)

    def record(self, swap: SwapRecord) -> None:
        """Store one swap-out record."""
        self._records.append(swap)

    def lines(self) -> list[str]:
        """Return the records rendered as log lines."""
        return [format_record(swap) for swap in self._records]

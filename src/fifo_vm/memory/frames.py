"""Frame pool — the simulated physical memory.

Physical memory is a fixed array of **frames**, each able to hold one
virtual page.  The pool hands frames out from a running cursor: frame
0 first, then 1, and so on.  Once the cursor reaches the end, every
frame has been used and ``free_count`` stays at zero for the rest of
the run.  From then on frames are only *recycled* through eviction:
the engine replaces a frame's occupant in place, and the frame is
never counted as free again.

This differs from ``MemoryManager``-style free sets, where freed
frames return to the pool.  Under demand paging with a full pool, a
frame is evicted and re-filled in the same step, so there is never a
moment at which it is actually free.
"""

from fifo_vm.errors import InvalidConfigurationError, PoolExhaustedError


class FramePool:
    """Fixed-capacity array of frame slots with a first-use cursor."""

    def __init__(self, capacity: int) -> None:
        """Create a pool with every frame free.

        Args:
            capacity: Number of physical frames.

        Raises:
            InvalidConfigurationError: If capacity is not positive.

        """
        if capacity <= 0:
            msg = f"Number of frames must be positive (got {capacity})"
            raise InvalidConfigurationError(msg)
        self._capacity = capacity
        self._slots: list[int | None] = [None] * capacity
        self._next_free = 0

    @property
    def capacity(self) -> int:
        """Return the number of physical frames."""
        return self._capacity

    def free_count(self) -> int:
        """Return how many frames have never been assigned."""
        return self._capacity - self._next_free

    def allocate_next_free(self) -> int:
        """Claim the lowest never-used frame.

        Returns:
            The claimed frame index.

        Raises:
            PoolExhaustedError: If every frame has already been used.

        """
        if self.free_count() == 0:
            msg = f"All {self._capacity} frames are in use"
            raise PoolExhaustedError(msg)
        frame = self._next_free
        self._next_free += 1
        return frame

    def occupant(self, frame: int) -> int | None:
        """Return the page held by a frame, or None if it is empty."""
        return self._slots[frame]

    def set_occupant(self, frame: int, page: int) -> None:
        """Place a page in a frame, replacing any previous occupant."""
        self._slots[frame] = page

    def occupancy(self) -> list[int | None]:
        """Return a snapshot of frame → page (None for empty frames)."""
        return list(self._slots)

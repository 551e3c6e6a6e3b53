"""Replacement engine — demand paging under FIFO replacement.

The engine owns the three memory structures and drives them through a
sequence of page references, one step at a time:

    1. **Hit** — the page is resident.  Nothing changes; in particular
       the FIFO queue is *not* reordered (that would be LRU).
    2. **Fault, free frame** — the page is not resident and some frame
       has never been used.  Claim it, load the page, queue it.
    3. **Fault, eviction** — the page is not resident and every frame
       is taken.  Pop the oldest page off the queue, swap it out,
       and load the new page into the same frame.

Each step yields exactly one event (see ``events.py``).  Evictions are
also offered to a **swap sink**, the simulated disk.  The sink is an
external collaborator: if it fails with ``OSError`` the engine logs a
warning and carries on, because a broken log file must never change
the outcome of the simulation.

The engine does no console or file I/O of its own.  Everything it has
to say goes into the event list, the swap sink, or the ``Logger``.
"""

from collections.abc import Iterable
from typing import Protocol

from fifo_vm.errors import (
    EmptyQueueError,
    InvalidReferenceError,
    InvalidStateError,
    SimulationAbortedError,
)
from fifo_vm.events import (
    FaultWithEvictionEvent,
    FaultWithFreeFrameEvent,
    HitEvent,
    SimulationResult,
    StepEvent,
    SwapRecord,
)
from fifo_vm.logging import Logger, LogLevel
from fifo_vm.memory.fifo import FIFOEvictionQueue
from fifo_vm.memory.frames import FramePool
from fifo_vm.memory.page_table import PageTable

_SOURCE = "engine"


class SwapSink(Protocol):
    """Anything that accepts swap-out records, one per eviction."""

    def record(self, swap: SwapRecord) -> None:
        """Persist one swap-out record.

        Raises:
            OSError: If the record could not be written.

        """
        ...


class ReplacementEngine:
    """Drive a page table, frame pool, and FIFO queue through references.

    One engine is one simulation run.  ``run()`` may be called more
    than once; later calls continue from the current state and step
    number.

    Args:
        num_frames: Number of physical frames.
        num_pages: Size of the virtual address space.
        swap_sink: Optional receiver for swap-out records.
        logger: Optional log buffer (a private one is created otherwise).

    """

    def __init__(
        self,
        *,
        num_frames: int,
        num_pages: int,
        swap_sink: SwapSink | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Create an engine with all pages non-resident and all frames free."""
        self._frames = FramePool(num_frames)
        self._page_table = PageTable(num_pages)
        self._queue = FIFOEvictionQueue()
        self._swap_sink = swap_sink
        self._logger = logger if logger is not None else Logger()
        self._events: list[StepEvent] = []
        self._page_faults = 0
        self._swaps_out = 0
        self._steps = 0

    # -- Accessors ----------------------------------------------------------

    @property
    def page_table(self) -> PageTable:
        """Return the page table."""
        return self._page_table

    @property
    def frame_pool(self) -> FramePool:
        """Return the frame pool."""
        return self._frames

    @property
    def queue(self) -> FIFOEvictionQueue:
        """Return the FIFO eviction queue."""
        return self._queue

    @property
    def logger(self) -> Logger:
        """Return the log buffer."""
        return self._logger

    @property
    def page_faults(self) -> int:
        """Return the total number of page faults so far."""
        return self._page_faults

    @property
    def swaps_out(self) -> int:
        """Return the total number of evictions so far."""
        return self._swaps_out

    @property
    def steps(self) -> int:
        """Return the number of references processed so far."""
        return self._steps

    @property
    def events(self) -> list[StepEvent]:
        """Return every step event so far, in order."""
        return list(self._events)

    def occupancy(self) -> list[int | None]:
        """Return the current frame → page array."""
        return self._frames.occupancy()

    def result(self) -> SimulationResult:
        """Return the aggregates of the run so far."""
        return SimulationResult(
            references=self._steps,
            page_faults=self._page_faults,
            swaps_out=self._swaps_out,
            occupancy=tuple(self._frames.occupancy()),
            events=tuple(self._events),
        )

    # -- Simulation ---------------------------------------------------------

    def validate(self, references: Iterable[int]) -> list[int]:
        """Check every reference against the address space.

        Returns:
            The references as a list.

        Raises:
            InvalidReferenceError: On the first out-of-range or
                non-integer reference.

        """
        refs = list(references)
        limit = self._page_table.num_pages
        for index, page in enumerate(refs, start=1):
            if isinstance(page, bool) or not isinstance(page, int):
                msg = f"Reference {index} is not an integer page number: {page!r}"
                raise InvalidReferenceError(msg)
            if not 0 <= page < limit:
                msg = f"Invalid page {page} at reference {index} (must be in [0, {limit - 1}])"
                raise InvalidReferenceError(msg)
        return refs

    def run(self, references: Iterable[int]) -> SimulationResult:
        """Validate the whole sequence, then process it in order.

        Raises:
            InvalidReferenceError: If any reference is out of range; no
                step is processed in that case.
            SimulationAbortedError: If an internal invariant breaks.

        """
        for page in self.validate(references):
            self.step(page)
        return self.result()

    def step(self, page: int) -> StepEvent:
        """Process a single reference and return its event.

        Raises:
            InvalidReferenceError: If the page is not an integer or is
                outside the address space.
            SimulationAbortedError: If the queue is empty with no free frame.

        """
        # Validates type and range before anything is mutated.
        resident = self._page_table.is_resident(page)
        self._steps += 1
        step = self._steps

        event: StepEvent
        if resident:
            frame = self._page_table.frame_of(page)
            if self._logger.enabled_for(LogLevel.DEBUG):
                self._logger.log(
                    LogLevel.DEBUG,
                    f"hit on page {page} (frame {frame})",
                    source=_SOURCE,
                    step=step,
                )
            event = HitEvent(step=step, page=page, frame=frame)
        else:
            self._page_faults += 1
            if self._frames.free_count() > 0:
                event = self._load_into_free_frame(step, page)
            else:
                event = self._evict_and_load(step, page)

        self._events.append(event)
        # The step is fully committed before the swap sink sees it.
        if isinstance(event, FaultWithEvictionEvent):
            self._offer_swap(SwapRecord(step=step, page=event.victim_page, frame=event.frame))
        return event

    def _load_into_free_frame(self, step: int, page: int) -> FaultWithFreeFrameEvent:
        frame = self._frames.allocate_next_free()
        self._frames.set_occupant(frame, page)
        self._page_table.mark_resident(page, frame)
        self._queue.push_tail(frame, page)
        free = self._frames.free_count()
        self._logger.log(
            LogLevel.INFO,
            f"page fault: page {page} loaded into frame {frame} ({free} free)",
            source=_SOURCE,
            step=step,
        )
        return FaultWithFreeFrameEvent(step=step, page=page, frame=frame, free_frames=free)

    def _evict_and_load(self, step: int, page: int) -> FaultWithEvictionEvent:
        try:
            victim_frame, victim_page = self._queue.pop_head()
        except EmptyQueueError as exc:
            msg = f"Internal error at step {step}: FIFO queue empty with no free frames"
            self._logger.log(LogLevel.ERROR, msg, source=_SOURCE, step=step)
            raise SimulationAbortedError(msg) from exc

        self._page_table.mark_evicted(victim_page)
        self._frames.set_occupant(victim_frame, page)
        self._page_table.mark_resident(page, victim_frame)
        self._queue.push_tail(victim_frame, page)
        self._swaps_out += 1
        self._logger.log(
            LogLevel.INFO,
            f"page fault: evicted page {victim_page} from frame {victim_frame}, loaded page {page}",
            source=_SOURCE,
            step=step,
        )
        return FaultWithEvictionEvent(
            step=step, page=page, frame=victim_frame, victim_page=victim_page
        )

    def _offer_swap(self, swap: SwapRecord) -> None:
        """Hand a swap-out record to the sink.

        ``OSError`` is logged as a warning and absorbed.  Anything else
        propagates, but only after the step's state changes are complete.
        """
        if self._swap_sink is None:
            return
        try:
            self._swap_sink.record(swap)
        except OSError as exc:
            self._logger.log(
                LogLevel.WARNING,
                f"swap log unavailable: {exc}",
                source=_SOURCE,
                step=swap.step,
            )

    # -- Consistency --------------------------------------------------------

    def check_invariants(self) -> None:
        """Verify the page table, frame pool, and queue agree.

        Raises:
            InvalidStateError: If any two views of residency diverge.

        """
        from_table = self._page_table.resident_pages()
        from_frames = {
            page: frame for frame, page in enumerate(self._frames.occupancy()) if page is not None
        }
        from_queue = {page: frame for frame, page in self._queue}

        if from_table != from_frames:
            msg = f"Page table {from_table} disagrees with frames {from_frames}"
            raise InvalidStateError(msg)
        if from_table != from_queue:
            msg = f"Page table {from_table} disagrees with FIFO queue {from_queue}"
            raise InvalidStateError(msg)
        occupied = sum(1 for page in self._frames.occupancy() if page is not None)
        if occupied != len(from_frames):
            msg = "A page occupies more than one frame"
            raise InvalidStateError(msg)
        if self._swaps_out > self._page_faults:
            msg = f"More swaps ({self._swaps_out}) than faults ({self._page_faults})"
            raise InvalidStateError(msg)

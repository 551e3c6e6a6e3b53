"""Step events and run results emitted by the replacement engine.

Every reference produces exactly one event.  Events are frozen
dataclasses so reporters can hold on to them without worrying about
later mutation.  The engine never formats them; see ``report.py``.
"""

from dataclasses import dataclass, field
from enum import StrEnum


class EventKind(StrEnum):
    """The three possible outcomes of a reference."""

    HIT = "hit"
    FAULT_FREE_FRAME = "fault_free_frame"
    FAULT_EVICTION = "fault_eviction"


@dataclass(frozen=True)
class HitEvent:
    """The referenced page was already resident."""

    step: int
    page: int
    frame: int

    @property
    def kind(self) -> EventKind:
        """Return the outcome category."""
        return EventKind.HIT


@dataclass(frozen=True)
class FaultWithFreeFrameEvent:
    """A fault satisfied by a never-used frame.

    Attributes:
        free_frames: Frames still unused after this allocation.

    """

    step: int
    page: int
    frame: int
    free_frames: int

    @property
    def kind(self) -> EventKind:
        """Return the outcome category."""
        return EventKind.FAULT_FREE_FRAME


@dataclass(frozen=True)
class FaultWithEvictionEvent:
    """A fault satisfied by evicting the oldest resident page.

    Attributes:
        victim_page: The page swapped out; ``frame`` is the reused frame.

    """

    step: int
    page: int
    frame: int
    victim_page: int

    @property
    def kind(self) -> EventKind:
        """Return the outcome category."""
        return EventKind.FAULT_EVICTION


StepEvent = HitEvent | FaultWithFreeFrameEvent | FaultWithEvictionEvent


@dataclass(frozen=True)
class SwapRecord:
    """One swap-out, as offered to the swap log."""

    step: int
    page: int
    frame: int


@dataclass(frozen=True)
class SimulationResult:
    """Final aggregates of a completed run.

    Attributes:
        references: Number of references processed.
        page_faults: Total faults (with or without eviction).
        swaps_out: Total evictions.
        occupancy: Final frame → page array (None for empty frames).
        events: Every step event, in order.

    """

    references: int
    page_faults: int
    swaps_out: int
    occupancy: tuple[int | None, ...]
    events: tuple[StepEvent, ...] = field(default=())

    @property
    def hits(self) -> int:
        """Return the number of references that hit."""
        return self.references - self.page_faults

    @property
    def fault_rate(self) -> float:
        """Return faults / references (0.0 for an empty run)."""
        if self.references == 0:
            return 0.0
        return self.page_faults / self.references

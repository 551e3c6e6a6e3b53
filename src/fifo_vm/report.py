"""Console report — turn events and results into text.

Pure functions only: they return strings and never print, so the REPL
stays a thin I/O wrapper and everything here is testable.
"""

from pathlib import Path

from fifo_vm.events import (
    FaultWithEvictionEvent,
    FaultWithFreeFrameEvent,
    HitEvent,
    SimulationResult,
    StepEvent,
)

_BANNER_WIDTH = 43
EMPTY_FRAME = "-"


def format_banner() -> str:
    """Return the title banner shown before input is collected."""
    border = "=" * _BANNER_WIDTH
    return f"{border}\n  Virtual Memory Simulator (FIFO replacement)\n{border}"


def format_event(event: StepEvent) -> str:
    """Render one step as ``Reference  N: page P --> outcome``."""
    prefix = f"Reference {event.step:2d}: page {event.page} --> "
    match event:
        case HitEvent(frame=frame):
            return f"{prefix}HIT (in frame {frame})"
        case FaultWithFreeFrameEvent(frame=frame, free_frames=free):
            return f"{prefix}PAGE FAULT -> loaded into frame {frame} (free frames now {free})"
        case FaultWithEvictionEvent(frame=frame, victim_page=victim):
            return (
                f"{prefix}PAGE FAULT -> evicted page {victim} (frame {frame}) "
                f"-> loaded page {event.page} into the same frame"
            )
    msg = f"Unknown event: {event!r}"
    raise TypeError(msg)


def format_occupancy(occupancy: tuple[int | None, ...] | list[int | None]) -> str:
    """Render the frame → page table, one ``frame NN: page`` line each."""
    return "\n".join(
        f"  frame {frame:2d}: {EMPTY_FRAME if page is None else page}"
        for frame, page in enumerate(occupancy)
    )


def format_statistics(result: SimulationResult, swap_file: Path | None = None) -> str:
    """Render the end-of-run statistics block."""
    swaps = f"Swaps (simulated) to disk: {result.swaps_out}"
    if swap_file is not None:
        swaps += f" (log in '{swap_file}')"
    lines = [
        "--- Statistics ---",
        f"References: {result.references}",
        f"Page faults: {result.page_faults}",
        f"Hits: {result.hits}",
        f"Fault rate: {result.fault_rate:.1%}",
        swaps,
        "Final frame state (frame: page):",
        format_occupancy(result.occupancy),
    ]
    return "\n".join(lines)

"""Simulation event log.

The engine narrates each step into a ``Logger`` rather than printing,
much like a kernel writes to its ``dmesg`` ring buffer.  Front ends
then pull out what they want to show, usually the warnings raised by
one particular step.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single record tagged with the step that produced it.
- **Logger** — a bounded buffer with a threshold level.

Design choices:
    - **Threshold at the door** — entries below ``min_level`` are never
      stored, so a long run full of hits costs nothing at INFO.
    - **Optional capacity** — with ``capacity`` set the buffer keeps only
      the newest entries, like a ring buffer.
"""

from collections import deque
from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The component that generated the event (e.g. "engine").
        step: The reference step being processed (0 = before the run).

    """

    level: LogLevel
    message: str
    source: str
    step: int = 0

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``, with the step when known."""
        where = f" (step {self.step})" if self.step else ""
        return f"[{self.level.name}] {self.source}{where}: {self.message}"


class Logger:
    """Step-tagged log buffer with a threshold and optional capacity.

    Args:
        min_level: Entries below this level are discarded on arrival.
        capacity: If set, only the newest ``capacity`` entries are kept.

    """

    def __init__(
        self,
        *,
        min_level: LogLevel = LogLevel.INFO,
        capacity: int | None = None,
    ) -> None:
        """Create an empty logger."""
        self._min_level = min_level
        self._entries: deque[LogEntry] = deque(maxlen=capacity)

    @property
    def entries(self) -> list[LogEntry]:
        """Return the retained entries in chronological order."""
        return list(self._entries)

    def enabled_for(self, level: LogLevel) -> bool:
        """Return True if entries at *level* would be kept."""
        return level >= self._min_level

    def log(self, level: LogLevel, message: str, *, source: str, step: int = 0) -> None:
        """Record an entry, unless it falls below the threshold."""
        if self.enabled_for(level):
            self._entries.append(LogEntry(level=level, message=message, source=source, step=step))

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
        step: int | None = None,
    ) -> list[LogEntry]:
        """Return entries matching every given criterion.

        Args:
            min_level: Keep only entries at or above this level.
            source: Keep only entries from this component.
            step: Keep only entries produced while processing this step.

        """
        return [
            e
            for e in self._entries
            if (min_level is None or e.level >= min_level)
            and (source is None or e.source == source)
            and (step is None or e.step == step)
        ]

"""FIFO-VM — a demand-paging simulator with FIFO page replacement.

Re-exports the engine and its collaborators so callers can write::

    from fifo_vm import ReplacementEngine
"""

from fifo_vm.config import SimulationConfig
from fifo_vm.engine import ReplacementEngine, SwapSink
from fifo_vm.errors import (
    EmptyQueueError,
    InvalidConfigurationError,
    InvalidReferenceError,
    InvalidStateError,
    PoolExhaustedError,
    SimulationAbortedError,
    SimulationError,
)
from fifo_vm.events import (
    EventKind,
    FaultWithEvictionEvent,
    FaultWithFreeFrameEvent,
    HitEvent,
    SimulationResult,
    StepEvent,
    SwapRecord,
)

__version__ = "0.1.0"

__all__ = [
    "EmptyQueueError",
    "EventKind",
    "FaultWithEvictionEvent",
    "FaultWithFreeFrameEvent",
    "HitEvent",
    "InvalidConfigurationError",
    "InvalidReferenceError",
    "InvalidStateError",
    "PoolExhaustedError",
    "ReplacementEngine",
    "SimulationAbortedError",
    "SimulationConfig",
    "SimulationError",
    "SimulationResult",
    "StepEvent",
    "SwapRecord",
    "SwapSink",
    "__version__",
]

"""Error taxonomy for the paging simulator.

Every failure the simulator can report derives from ``SimulationError``
so collaborators (the REPL, the web API) can catch one type at the
boundary.  Nothing here is retried: bad input means the run never
starts, and a broken invariant means the run aborts.
"""


class SimulationError(Exception):
    """Base class for all simulator errors."""


class InvalidConfigurationError(SimulationError):
    """Raise when frame or page counts are not positive integers."""


class InvalidReferenceError(SimulationError):
    """Raise when a page reference lies outside ``[0, num_pages)``."""


class InvalidStateError(SimulationError):
    """Raise when the page table is asked for an inconsistent transition."""


class PoolExhaustedError(SimulationError):
    """Raise when a frame is requested from a pool with none left."""


class EmptyQueueError(SimulationError):
    """Raise when the eviction queue is popped while empty."""


class SimulationAbortedError(SimulationError):
    """Raise when a run hits an internal-consistency failure and stops."""

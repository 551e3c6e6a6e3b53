"""Memory structures — page table, frame pool, and eviction queue.

Re-exports public symbols so callers can write::

    from fifo_vm.memory import FramePool, PageTable
"""

from fifo_vm.memory.fifo import FIFOEvictionQueue
from fifo_vm.memory.frames import FramePool
from fifo_vm.memory.page_table import PageTable, PageTableEntry

__all__ = [
    "FIFOEvictionQueue",
    "FramePool",
    "PageTable",
    "PageTableEntry",
]

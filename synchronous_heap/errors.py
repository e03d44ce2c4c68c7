class HeapError(Exception):
    """Base class for errors raised by the heap containers."""


class HeapConstructionError(HeapError, TypeError):
    """A comparator or input sequence failed a construction precondition."""


class EmptyQueueError(HeapError, IndexError):
    """Raised when reading the top of an empty SynchronousHeap."""

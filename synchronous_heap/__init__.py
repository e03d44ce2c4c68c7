from .errors import EmptyQueueError, HeapConstructionError, HeapError
from .heap import Heap
from .max_heap import MaxHeap, max_compare
from .synchronous_heap import SynchronousHeap, TimestampedItem

__all__ = [
    'Heap',
    'MaxHeap',
    'max_compare',
    'SynchronousHeap',
    'TimestampedItem',
    'HeapError',
    'HeapConstructionError',
    'EmptyQueueError',
]

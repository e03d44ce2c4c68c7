from typing import Any, Callable, List, Optional

from .errors import HeapConstructionError
from .heap import Heap


def max_compare(key: Optional[Callable[[Any], Any]] = None):
    """Comparator that puts the element with the largest key at the heap root.

    Equal keys compare as -1 rather than 0, so a parent is never swapped
    with a child holding the same key.
    """
    def compare(a, b):
        a_val = key(a) if callable(key) else a
        b_val = key(b) if callable(key) else b
        return 1 if a_val < b_val else -1

    return compare


class MaxHeap:
    def __init__(self, key: Optional[Callable[[Any], Any]] = None, heap: Optional[Heap] = None):
        self._key = key
        self._heap = heap if heap is not None else Heap(max_compare(key))

    def insert(self, value: Any):
        self._heap.insert(value)
        return self

    def push(self, value: Any):
        return self.insert(value)

    def extract_root(self):
        return self._heap.extract_root()

    def pop(self):
        return self.extract_root()

    def sort(self):
        return self._heap.sort()

    def fix(self):
        self._heap.fix()
        return self

    def is_valid(self):
        return self._heap.is_valid()

    def root(self):
        return self._heap.root()

    def top(self):
        return self.root()

    def leaf(self):
        return self._heap.leaf()

    def size(self):
        return self._heap.size()

    def is_empty(self):
        return self._heap.is_empty()

    def clear(self):
        self._heap.clear()

    def clone(self):
        return MaxHeap(self._key, self._heap.clone())

    @staticmethod
    def heapify(values: List[Any], key: Optional[Callable[[Any], Any]] = None):
        if not isinstance(values, list):
            raise HeapConstructionError("MaxHeap.heapify expects a list")
        return MaxHeap(key, Heap(max_compare(key), values)).fix()

    @staticmethod
    def is_heapified(values: List[Any], key: Optional[Callable[[Any], Any]] = None):
        if not isinstance(values, list):
            raise HeapConstructionError("MaxHeap.is_heapified expects a list")
        return MaxHeap(key, Heap(max_compare(key), values)).is_valid()

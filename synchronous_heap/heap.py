import logging
from typing import Any, Callable, List, Optional

from .errors import HeapConstructionError

logger = logging.getLogger(__name__)

# Marks an unset leaf, so None can be stored and cached like any other value
_NO_LEAF = object()


class Heap:
    """Array-backed binary heap ordered by a caller-supplied comparator.

    ``compare(a, b)`` returns a negative number, zero or a positive number;
    the root is always the element that compares smallest. Besides the
    backing list the heap caches ``leaf``: the last inserted value that no
    later value compared greater than. Extracting the root resets the leaf
    only when the root is the cached object itself (an identity check, not
    equality). ``leaf()`` returns None while nothing is cached.
    """

    def __init__(self, compare: Callable[[Any, Any], int], values: Optional[List[Any]] = None,
                 leaf: Any = _NO_LEAF):
        if not callable(compare):
            raise HeapConstructionError("Heap constructor expects a compare function")
        self._compare = compare
        self._nodes = values if isinstance(values, list) else []
        self._leaf = leaf

    def _parent(self, i: int):
        return (i - 1) // 2

    def _left(self, i: int):
        return 2 * i + 1

    def _right(self, i: int):
        return 2 * i + 2

    def _has_left_child(self, i: int):
        return self._left(i) < len(self._nodes)

    def _has_right_child(self, i: int):
        return self._right(i) < len(self._nodes)

    def _compare_at(self, i: int, j: int):
        return self._compare(self._nodes[i], self._nodes[j])

    def _swap(self, i: int, j: int):
        self._nodes[i], self._nodes[j] = self._nodes[j], self._nodes[i]

    def _should_swap(self, parent: int, child: int):
        size = len(self._nodes)
        if parent < 0 or parent >= size:
            return False
        if child < 0 or child >= size:
            return False
        return self._compare_at(parent, child) > 0

    def _compare_children_of(self, parent: int):
        # -1 when the node has no children, so _should_swap stops the loop
        if not self._has_left_child(parent):
            return -1
        left = self._left(parent)
        right = self._right(parent)
        if not self._has_right_child(parent):
            return left
        return right if self._compare_at(left, right) > 0 else left

    def _compare_children_before(self, end: int, left: int, right: int):
        if self._compare_at(right, left) <= 0 and right < end:
            return right
        return left

    def _bubble_up(self, i: int):
        parent = self._parent(i)
        while self._should_swap(parent, i):
            self._swap(parent, i)
            i = parent
            parent = self._parent(i)

    def _bubble_down(self, i: int):
        child = self._compare_children_of(i)
        while self._should_swap(i, child):
            self._swap(i, child)
            i = child
            child = self._compare_children_of(i)

    def _bubble_down_until(self, end: int):
        """Sift the root down within ``_nodes[:end]``, leaving the sorted tail alone."""
        parent = 0
        left = 1
        right = 2
        while left < end:
            child = self._compare_children_before(end, left, right)
            if self._should_swap(parent, child):
                self._swap(parent, child)
            parent = child
            left = self._left(parent)
            right = self._right(parent)

    def insert(self, value: Any):
        self._nodes.append(value)
        self._bubble_up(len(self._nodes) - 1)
        if self._leaf is _NO_LEAF or self._compare(value, self._leaf) > 0:
            self._leaf = value
        return self

    def push(self, value: Any):
        return self.insert(value)

    def extract_root(self):
        if self.is_empty():
            return None

        root = self._nodes[0]
        self._nodes[0] = self._nodes[-1]
        self._nodes.pop()
        self._bubble_down(0)
        if root is self._leaf:
            self._leaf = self._nodes[0] if self._nodes else _NO_LEAF
        return root

    def pop(self):
        return self.extract_root()

    def sort(self):
        """Heap-sort the backing list in place and return it.

        The returned list is the heap's own storage, ordered smallest first
        under ``compare``. Clone the heap first to keep the original layout.
        """
        for i in range(len(self._nodes) - 1, 0, -1):
            self._swap(0, i)
            self._bubble_down_until(i)
        self._nodes.reverse()
        logger.debug("Sorted %d heap nodes", len(self._nodes))
        return self._nodes

    def fix(self):
        for i in range(len(self._nodes)):
            self._bubble_up(i)
        logger.debug("Restored heap order over %d nodes", len(self._nodes))
        return self

    def is_valid(self):
        def is_valid_from(parent: int):
            if self._has_left_child(parent):
                left = self._left(parent)
                if self._compare_at(parent, left) > 0:
                    return False
                if not is_valid_from(left):
                    return False
            if self._has_right_child(parent):
                right = self._right(parent)
                if self._compare_at(parent, right) > 0:
                    return False
                if not is_valid_from(right):
                    return False
            return True

        return is_valid_from(0)

    def clone(self):
        return Heap(self._compare, list(self._nodes), self._leaf)

    def root(self):
        return self._nodes[0] if self._nodes else None

    def top(self):
        return self.root()

    def leaf(self):
        return None if self._leaf is _NO_LEAF else self._leaf

    def size(self):
        return len(self._nodes)

    def is_empty(self):
        return len(self._nodes) == 0

    def clear(self):
        self._nodes = []
        self._leaf = _NO_LEAF

    @staticmethod
    def heapify(values: List[Any], compare: Callable[[Any, Any], int]):
        """Build a heap over ``values`` (the same list, reordered in place)."""
        if not isinstance(values, list):
            raise HeapConstructionError("Heap.heapify expects a list of values")
        if not callable(compare):
            raise HeapConstructionError("Heap.heapify expects a compare function")
        return Heap(compare, values).fix()

    @staticmethod
    def is_heapified(values: List[Any], compare: Callable[[Any, Any], int]):
        if not isinstance(values, list):
            raise HeapConstructionError("Heap.is_heapified expects a list of values")
        if not callable(compare):
            raise HeapConstructionError("Heap.is_heapified expects a compare function")
        return Heap(compare, values).is_valid()

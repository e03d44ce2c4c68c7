import logging
import time
from typing import Any, Callable, Optional

from pydantic import BaseModel

from .errors import EmptyQueueError
from .max_heap import MaxHeap

logger = logging.getLogger(__name__)


def wall_clock_millis():
    return time.time_ns() // 1_000_000


class TimestampedItem(BaseModel):
    payload: Any
    timestamp: int


class SynchronousHeap:
    """Keeps pushed payloads ordered by push time, newest on top.

    Every push adds an ever-growing ``basis`` to the clock reading, so two
    pushes in the same millisecond still get distinct, increasing
    timestamps and the later one wins.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock if clock is not None else wall_clock_millis
        self._store = MaxHeap(lambda item: item.timestamp)
        self.basis = 0

    def push(self, payload: Any):
        self.basis += 1
        item = TimestampedItem(payload=payload, timestamp=self._clock() + self.basis)
        self._store.push(item)
        logger.debug("Pushed item with timestamp %d (basis %d)", item.timestamp, self.basis)
        return self

    def top(self):
        item = self._store.top()
        if item is None:
            raise EmptyQueueError("top() called on an empty SynchronousHeap")
        return item.payload

    def size(self):
        return self._store.size()

    def is_empty(self):
        return self._store.is_empty()

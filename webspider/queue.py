"""Crawl queues: a priority queue for breadth-first and a stack for depth-first."""

from __future__ import annotations

import heapq
import itertools
import threading
import time
from enum import Enum
from typing import Any, Iterator


class Strategy(Enum):
    """Order in which queued items are handed out."""

    BREADTH_FIRST = "breadth-first"
    DEPTH_FIRST = "depth-first"

    @classmethod
    def from_name(cls, name: str) -> "Strategy":
        """Return the strategy called ``name``; raise ValueError if unknown."""
        try:
            return cls(name)
        except ValueError:
            raise ValueError("unsupported strategy") from None

    def __str__(self) -> str:
        return self.value


class PriorityQueue:
    """Min-heap: items with lower priority values come out first."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Any]] = []
        self._counter = itertools.count()

    def push(self, value: Any, priority: int) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), value))

    def pop(self) -> Any:
        """Remove and return the lowest-priority item, or None when empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)


class Stack:
    """Last-in, first-out container."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the most recent item, or None when empty."""
        if not self._items:
            return None
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class Queue:
    """Thread-safe crawl queue following a breadth-first or depth-first strategy.

    Breadth-first hands out items by ascending priority; depth-first hands
    them out in LIFO order and ignores priorities.
    """

    poll_interval = 1.0

    def __init__(self, strategy_name: str, timeout: float) -> None:
        self.strategy = Strategy.from_name(strategy_name)
        self.timeout = float(timeout)
        self._lock = threading.Lock()
        self._stack = Stack()
        self._priority_queue = PriorityQueue()

    def _container(self) -> PriorityQueue | Stack:
        if self.strategy is Strategy.BREADTH_FIRST:
            return self._priority_queue
        return self._stack

    def __len__(self) -> int:
        with self._lock:
            return len(self._container())

    def push(self, item: Any, priority: int = 0) -> None:
        """Add an item; the priority only matters for breadth-first."""
        with self._lock:
            if self.strategy is Strategy.BREADTH_FIRST:
                self._priority_queue.push(item, priority)
            else:
                self._stack.push(item)

    def pop(self) -> Iterator[Any]:
        """Yield items as they become available.

        The generator ends once the queue has stayed empty for longer than
        the timeout since the last item was handed out.
        """
        start = time.monotonic()
        while True:
            with self._lock:
                item = self._container().pop()
            if item is None:
                if time.monotonic() - start < self.timeout:
                    time.sleep(self.poll_interval)
                    continue
                return
            yield item
            start = time.monotonic()
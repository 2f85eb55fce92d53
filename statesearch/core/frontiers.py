# statesearch/core/frontiers.py
# Frontier disciplines: LIFO for DFS, FIFO for BFS, min-priority for A*.
from __future__ import annotations
import heapq
from collections import deque
from typing import Callable, Deque, Generic, List, Tuple, TypeVar

T = TypeVar("T")


class LIFOStack(Generic[T]):
    def __init__(self) -> None:
        self._items: List[T] = []
    def push(self, item: T) -> None: self._items.append(item)
    def pop(self) -> T: return self._items.pop()
    def peek(self) -> T: return self._items[-1]
    def __len__(self) -> int: return len(self._items)
    def __bool__(self) -> bool: return bool(self._items)


class FIFOQueue(Generic[T]):
    def __init__(self) -> None:
        self._items: Deque[T] = deque()
    def push(self, item: T) -> None: self._items.append(item)
    def pop(self) -> T: return self._items.popleft()
    def peek(self) -> T: return self._items[0]
    def __len__(self) -> int: return len(self._items)
    def __bool__(self) -> bool: return bool(self._items)


class PriorityQueue(Generic[T]):
    """
    Min-heap by key(item). Equal keys pop in insertion order: every entry
    carries a monotonically increasing sequence number as a tie-breaker, so
    items themselves never need to be comparable.
    """
    def __init__(self, key: Callable[[T], float]) -> None:
        self.key = key
        self._heap: List[Tuple[float, int, T]] = []
        self._seq = 0

    def push(self, item: T) -> None:
        heapq.heappush(self._heap, (self.key(item), self._seq, item))
        self._seq += 1

    def pop(self) -> T:
        return heapq.heappop(self._heap)[2]

    def peek(self) -> T:
        return self._heap[0][2]

    def __len__(self) -> int: return len(self._heap)
    def __bool__(self) -> bool: return bool(self._heap)

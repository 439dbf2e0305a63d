"""Binary min-heap used as the A* frontier."""

from __future__ import annotations

from typing import Any, Generic, List, Optional, Protocol, TypeVar


class _Comparable(Protocol):
    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=_Comparable)


class PriorityQueue(Generic[T]):
    """Min-heap ordered by ``<`` on the stored elements.

    There is no decrease-key. Callers that need to lower a priority push a
    second entry and skip the stale one when it surfaces.
    """

    __slots__ = ("_heap",)

    def __init__(self) -> None:
        self._heap: List[T] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    @property
    def is_empty(self) -> bool:
        return not self._heap

    def enqueue(self, element: T) -> None:
        """Insert ``element``."""
        self._heap.append(element)
        self._sift_up(len(self._heap) - 1)

    def dequeue(self) -> Optional[T]:
        """Remove and return the smallest element, or ``None`` when empty."""
        heap = self._heap
        if not heap:
            return None
        heap[0], heap[-1] = heap[-1], heap[0]
        value = heap.pop()
        self._sift_down(0)
        return value

    def peek(self) -> Optional[T]:
        """Return the smallest element without removing it."""
        return self._heap[0] if self._heap else None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _sift_up(self, index: int) -> None:
        heap = self._heap
        child = index
        while child > 0:
            parent = (child - 1) // 2
            if not heap[child] < heap[parent]:
                break
            heap[child], heap[parent] = heap[parent], heap[child]
            child = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        count = len(heap)
        parent = index
        while True:
            left = 2 * parent + 1
            right = left + 1
            candidate = parent
            if left < count and heap[left] < heap[candidate]:
                candidate = left
            if right < count and heap[right] < heap[candidate]:
                candidate = right
            if candidate == parent:
                return
            heap[parent], heap[candidate] = heap[candidate], heap[parent]
            parent = candidate


__all__ = ["PriorityQueue"]

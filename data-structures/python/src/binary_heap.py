"""Array-backed binary heap.

A single BinaryHeap serves as both min-heap and max-heap. The ordering is a
predicate ``higher_priority(a, b)`` that reports whether ``a`` belongs closer
to the root than ``b``. Empty peek/pop return None rather than raising.
"""

import logging
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar('T')

logger = logging.getLogger(__name__)


def min_priority(a, b) -> bool:
    return a < b


def max_priority(a, b) -> bool:
    return a > b


class BinaryHeap(Generic[T]):
    def __init__(self, higher_priority: Callable[[T, T], bool] = min_priority) -> None:
        if not callable(higher_priority):
            raise TypeError(
                f"higher_priority must be callable, got {type(higher_priority).__name__}"
            )
        self._data: List[T] = []
        self._higher = higher_priority

    @property
    def higher_priority(self) -> Callable[[T, T], bool]:
        return self._higher

    def push(self, item: T) -> None:
        self._data.append(item)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> Optional[T]:
        if not self._data:
            return None
        root = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return root

    def peek(self) -> Optional[T]:
        if not self._data:
            return None
        return self._data[0]

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap(self._higher)
        clone._data = self._data.copy()
        return clone

    @staticmethod
    def from_array(
        arr: Iterable[T], higher_priority: Callable[[T, T], bool] = min_priority
    ) -> 'BinaryHeap[T]':
        """Build a heap from an iterable in O(n).

        Note: Creates a shallow copy of the input.
        """
        heap: BinaryHeap[T] = BinaryHeap(higher_priority)
        heap._data = list(arr)
        for i in range(len(heap._data) // 2 - 1, -1, -1):
            heap._sift_down(i)
        return heap

    def is_valid(self) -> bool:
        """Return True if every child yields to its parent."""
        for i in range(1, len(self._data)):
            parent = (i - 1) // 2
            if self._higher(self._data[i], self._data[parent]):
                logger.debug(
                    "heap property violated: child %d (%r) outranks parent %d (%r)",
                    i, self._data[i], parent, self._data[parent],
                )
                return False
        return True

    # index 0 never enters the loop, so the root is never compared with a parent
    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if not self._higher(data[index], data[parent]):
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            left = 2 * index + 1
            if left >= size:
                break
            child = left
            right = left + 1
            # ties go to the left child
            if right < size and self._higher(data[right], data[left]):
                child = right
            if not self._higher(data[child], data[index]):
                break
            data[index], data[child] = data[child], data[index]
            index = child

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data})"

    def __str__(self) -> str:
        return f"BinaryHeap(size={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.pop()


def min_heap(items: Optional[Iterable[T]] = None) -> BinaryHeap[T]:
    """Smallest element at the root."""
    if items is None:
        return BinaryHeap(min_priority)
    return BinaryHeap.from_array(items, min_priority)


def max_heap(items: Optional[Iterable[T]] = None) -> BinaryHeap[T]:
    """Largest element at the root."""
    if items is None:
        return BinaryHeap(max_priority)
    return BinaryHeap.from_array(items, max_priority)

from typing import TypeVar, Generic, List, Iterable, Optional, Callable

T = TypeVar('T')

Comparator = Callable[[T, T], bool]


def _less(a, b) -> bool:
    return a < b


def _greater(a, b) -> bool:
    return a > b


class BinaryHeap(Generic[T]):
    """Array-backed binary heap ordered by a comparator.

    ``comparator(a, b)`` returns True when ``a`` should sit above ``b``.
    Elements live at indices 1..count; slot 0 is a placeholder.
    """

    def __init__(self, comparator: Comparator) -> None:
        if not callable(comparator):
            raise TypeError("comparator must be callable")
        self._comparator = comparator
        self._count = 0
        self._items: List[Optional[T]] = [None]

    @staticmethod
    def new_min() -> 'BinaryHeap[T]':
        return BinaryHeap(_less)

    @staticmethod
    def new_max() -> 'BinaryHeap[T]':
        return BinaryHeap(_greater)

    @staticmethod
    def from_array(arr: Iterable[T], comparator: Comparator) -> 'BinaryHeap[T]':
        """Build a heap from an iterable in linear time.

        Note: Creates a shallow copy of the input.
        """
        heap: BinaryHeap[T] = BinaryHeap(comparator)
        heap._items.extend(arr)
        heap._count = len(heap._items) - 1
        for i in range(heap._count // 2, 0, -1):
            heap._sift_down(i)
        return heap

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def add(self, value: T) -> None:
        self._count += 1
        if len(self._items) <= self._count:
            self._items.append(value)
        else:
            self._items[self._count] = value
        self._sift_up(self._count)

    def extract_top(self) -> Optional[T]:
        """Remove and return the highest-priority element, or None if empty."""
        if self._count == 0:
            return None
        result = self._items[1]
        self._items[1] = self._items[self._count]
        self._count -= 1
        if self._count > 0:
            self._sift_down(1)
        del self._items[self._count + 1:]
        return result

    def peek(self) -> Optional[T]:
        if self._count == 0:
            return None
        return self._items[1]

    def clear(self) -> None:
        self._items = [None]
        self._count = 0

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap(self._comparator)
        clone._items = self._items[:self._count + 1]
        clone._count = self._count
        return clone

    @staticmethod
    def _parent(index: int) -> int:
        return index // 2

    @staticmethod
    def _left(index: int) -> int:
        return index * 2

    @staticmethod
    def _right(index: int) -> int:
        return index * 2 + 1

    def _has_children(self, index: int) -> bool:
        return index * 2 <= self._count

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 1:
            parent = self._parent(index)
            if not self._comparator(items[index], items[parent]):
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        while self._has_children(index):
            left = self._left(index)
            right = self._right(index)
            child = left
            # left child wins ties
            if right <= self._count and self._comparator(items[right], items[left]):
                child = right
            if not self._comparator(items[child], items[index]):
                break
            items[index], items[child] = items[child], items[index]
            index = child

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __iter__(self) -> 'BinaryHeap[T]':
        return self

    def __next__(self) -> T:
        if self._count == 0:
            raise StopIteration
        return self.extract_top()

    def __repr__(self) -> str:
        return f"BinaryHeap({self._items[1:self._count + 1]})"

    def __str__(self) -> str:
        return f"BinaryHeap(size={self._count})"


def min_heap() -> BinaryHeap:
    """Heap that yields the smallest element first."""
    return BinaryHeap.new_min()


def max_heap() -> BinaryHeap:
    """Heap that yields the largest element first."""
    return BinaryHeap.new_max()

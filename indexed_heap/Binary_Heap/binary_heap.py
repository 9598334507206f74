"""
Array-backed binary max-heap with indexed access.

Layout:
- `storage` holds `capacity + 1` slots; slot 0 is never used, so for slot i
  the parent is i // 2 and the children are 2i and 2i + 1.
- Slots 1..size are occupied and satisfy the heap property
  key(storage[i // 2]) >= key(storage[i]) for every i > 1.

Elements are copied on the way in (insert, build_heap) and on the way out
(find_max, delete_max, remove_kth_max, delete), so the heap never shares a
slot with its caller.

Equal keys carry no stability guarantee: sift_up swaps on ties.
"""

from numbers import Integral
from typing import Any, List, Optional, Sequence, Union

import numpy as np

from .heap_element import HeapElement
from .errors import (
    InvalidCapacity,
    HeapFull,
    HeapEmpty,
    InvalidIndex,
    InvalidArgument
)

Storage = List[Optional[HeapElement]]


class BinaryHeap:
    def __init__(self, capacity: int):
        """
        Create an empty heap that can hold exactly `capacity` elements.

        Args:
            - capacity: Maximum number of elements (>= 0). A zero-capacity
              heap is legal but permanently empty.
        """
        if not isinstance(capacity, Integral) or isinstance(capacity, bool):
            raise InvalidCapacity(f"capacity must be an integer, got {type(capacity)}")
        if capacity < 0:
            raise InvalidCapacity(f"capacity must be non-negative, got {capacity}")

        self.capacity: int = int(capacity)
        self.size: int = 0
        self.storage: Storage = [None] * (self.capacity + 1) # slot 0 unused

    # -----------------------
    # Construction
    # -----------------------
    @classmethod
    def build_heap(cls, elements: Sequence[HeapElement]) -> "BinaryHeap":
        """
        Build a heap from an unordered sequence of elements in linear time.

        The elements are copied into slots 1..n and the heap property is
        restored bottom-up, sifting down every slot that has a child,
        from n // 2 to the root.
        """
        elements = list(elements)
        heap = cls(len(elements))

        for i, element in enumerate(elements, start=1):
            heap.storage[i] = element.copy()
        heap.size = len(elements)

        for i in range(heap.size // 2, 0, -1):
            heap.sift_down(i)
        return heap

    @classmethod
    def from_keys(
        cls,
        keys: Union[Sequence[int], np.ndarray],
        data: Optional[Sequence[Any]] = None,
    ) -> "BinaryHeap":
        """
        Build a heap straight from integer keys (list or numpy array).

        Args:
            - keys: 1D sequence or numpy array of integer keys.
            - data: Optional payloads, one per key. Defaults to None payloads.

        Returns:
            - heap: BinaryHeap with capacity == size == len(keys).
        """
        keys = np.asarray(keys)

        if keys.ndim != 1:
            raise ValueError(f"keys must be a 1D array, got shape {keys.shape}")

        if keys.size > 0 and not np.issubdtype(keys.dtype, np.integer):
            raise ValueError(f"keys must be integers, got dtype {keys.dtype}")

        if data is None:
            data = [None] * len(keys)
        elif len(data) != len(keys):
            raise ValueError(
                f"data must match keys in length, got {len(data)} payloads for {len(keys)} keys"
            )

        # tolist() turns numpy scalars into plain Python ints
        return cls.build_heap(
            HeapElement(key, payload) for key, payload in zip(keys.tolist(), data)
        )

    # -----------------------
    # Priority-queue operations
    # -----------------------
    def insert(self, element: HeapElement) -> None:
        """
        Insert a copy of `element` and percolate it up.
        Raises HeapFull when size == capacity.
        """
        if self.size == self.capacity:
            raise HeapFull(f"heap is full (capacity {self.capacity})")

        self.size += 1
        self.storage[self.size] = element.copy()
        self.sift_up(self.size)

    def find_max(self) -> HeapElement:
        """Return a copy of the maximum element without removing it."""
        if self.size == 0:
            raise HeapEmpty("cannot find max of an empty heap")
        return self.storage[1].copy()

    def delete_max(self) -> HeapElement:
        """
        Remove the maximum element and return it.

        The last occupied slot replaces the root and is percolated down.
        """
        if self.size == 0:
            raise HeapEmpty("cannot delete max of an empty heap")

        deleted_max = self.storage[1].copy()

        self.storage[1] = self.storage[self.size]
        self.storage[self.size] = None
        self.size -= 1

        if self.size > 0:
            self.sift_down(1)
        return deleted_max

    def remove_kth_max(self, k: int) -> HeapElement:
        """
        Remove the k largest elements and return the k-th one.

        This is not a peek: all k elements leave the heap, so size drops by k.

        Args:
            - k: Rank of the element to return, 1 <= k <= size.

        Returns:
            - The k-th largest element (a copy).
        """
        if self.size == 0:
            raise HeapEmpty("cannot remove k-th max of an empty heap")
        if k < 1:
            raise InvalidArgument(f"k must be positive, got {k}")
        if k > self.size:
            raise InvalidArgument(f"k must be <= size, got k={k}, size={self.size}")

        for _ in range(k):
            kth_max = self.delete_max()
        return kth_max

    # -----------------------
    # Indexed mutation
    # -----------------------
    def increase_key(self, index: int, delta: int) -> None:
        """Add `delta` (>= 1) to the key at `index` and percolate it up."""
        self._check_index(index)
        self._check_delta(delta)

        self.storage[index].key += delta
        self.sift_up(index)

    def decrease_key(self, index: int, delta: int) -> None:
        """Subtract `delta` (>= 1) from the key at `index` and percolate it down."""
        self._check_index(index)
        self._check_delta(delta)

        self.storage[index].key -= delta
        self.sift_down(index)

    def delete(self, index: int) -> HeapElement:
        """
        Remove the element at `index` and return it.

        The element is promoted to the root by raising its key above the
        current maximum, then extracted with delete_max. The index is
        validated before any slot is touched, and the returned copy carries
        the element's original key.
        """
        self._check_index(index)

        original_key = self.storage[index].key
        self.increase_key(index, self.storage[1].key - original_key + 1)

        deleted = self.delete_max()
        deleted.key = original_key
        return deleted

    # -----------------------
    # Sorting
    # -----------------------
    @staticmethod
    def heap_sort(elements: Sequence[HeapElement]) -> List[HeapElement]:
        """
        Return the elements sorted by ascending key.

        Builds a heap from the input and drains it with delete_max, filling
        the result from the last position down to the first.
        """
        heap = BinaryHeap.build_heap(elements)

        result: List[Optional[HeapElement]] = [None] * heap.size
        for i in range(heap.size - 1, -1, -1):
            result[i] = heap.delete_max()
        return result

    # -----------------------
    # Percolation primitives
    # -----------------------
    def sift_up(self, index: int) -> None:
        """
        Move the element at `index` towards the root while its parent's key
        is <= its own. Equal keys swap.
        """
        storage = self.storage
        while index > 1 and storage[index // 2].key <= storage[index].key:
            parent = index // 2
            storage[index], storage[parent] = storage[parent], storage[index]
            index = parent

    def sift_down(self, index: int) -> None:
        """
        Move the element at `index` towards the leaves, swapping with the
        larger child while that child's key is strictly greater.
        Only children within 1..size take part.
        """
        storage = self.storage
        while True:
            left = 2 * index
            if left > self.size:
                break # leaf

            right = left + 1
            larger = left
            if right <= self.size and storage[right].key > storage[left].key:
                larger = right

            if storage[larger].key <= storage[index].key:
                break

            storage[index], storage[larger] = storage[larger], storage[index]
            index = larger

    # -----------------------
    # Introspection
    # -----------------------
    def is_empty(self) -> bool:
        return self.size == 0

    def is_full(self) -> bool:
        return self.size == self.capacity

    def is_heap(self) -> bool:
        """Check the heap property over every occupied slot."""
        return all(
            self.storage[i // 2].key >= self.storage[i].key
            for i in range(2, self.size + 1)
        )

    def keys(self) -> List[int]:
        """Keys in storage order (slots 1..size), not sorted order."""
        return [self.storage[i].key for i in range(1, self.size + 1)]

    def __len__(self) -> int:
        return self.size

    def __str__(self) -> str:
        return ", ".join(str(key) for key in self.keys())

    def __repr__(self) -> str:
        return f"BinaryHeap(size={self.size}, capacity={self.capacity}, keys=[{self}])"

    # -----------------------
    # Validation helpers
    # -----------------------
    def _check_index(self, index: int) -> None:
        if index < 1 or index > self.size:
            raise InvalidIndex(f"index must be in [1, {self.size}], got {index}")

    @staticmethod
    def _check_delta(delta: int) -> None:
        if delta < 1:
            raise InvalidArgument(f"delta must be positive, got {delta}")

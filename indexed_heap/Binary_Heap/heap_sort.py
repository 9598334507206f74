from typing import List, Sequence, Union

import numpy as np

from .binary_heap import BinaryHeap
from .heap_element import HeapElement


def heap_sort(elements: Sequence[HeapElement]) -> List[HeapElement]:
    """
    Sort elements by ascending key using BinaryHeap.build_heap + delete_max.

    Args:
        - elements: Unordered sequence of HeapElement.

    Returns:
        - New list of element copies in ascending key order. The input is
          left untouched.
    """
    return BinaryHeap.heap_sort(elements)


def heap_sort_keys(keys: Union[Sequence[int], np.ndarray]) -> np.ndarray:
    """
    Heap-sort a 1D array of integer keys.

    Args:
        - keys: 1D list or numpy array of integers.

    Returns:
        - sorted_keys: int64 numpy array of the same keys in ascending order.
    """
    heap = BinaryHeap.from_keys(keys)

    sorted_keys = np.empty(heap.size, dtype=np.int64)
    for i in range(heap.size - 1, -1, -1):
        sorted_keys[i] = heap.delete_max().key
    return sorted_keys

from .heap_element import HeapElement
from .binary_heap import BinaryHeap
from .heap_sort import heap_sort, heap_sort_keys
from .errors import (
    ErrorKind,
    HeapError,
    InvalidCapacity,
    HeapFull,
    HeapEmpty,
    InvalidIndex,
    InvalidArgument
)

__all__ = [
    "HeapElement",
    "BinaryHeap",
    "heap_sort",
    "heap_sort_keys",
    "ErrorKind",
    "HeapError",
    "InvalidCapacity",
    "HeapFull",
    "HeapEmpty",
    "InvalidIndex",
    "InvalidArgument"
]

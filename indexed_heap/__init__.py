from .Binary_Heap import (
    HeapElement,
    BinaryHeap,
    heap_sort,
    heap_sort_keys,
    ErrorKind,
    HeapError,
    InvalidCapacity,
    HeapFull,
    HeapEmpty,
    InvalidIndex,
    InvalidArgument
)

__version__ = "0.1.0"

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

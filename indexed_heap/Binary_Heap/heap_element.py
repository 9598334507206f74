from typing import Any, Generic, TypeVar

T = TypeVar("T")


class HeapElement(Generic[T]):
    """
    A key/payload pair stored in a BinaryHeap.

    Only `key` takes part in ordering; `data` is carried along untouched.
    """
    def __init__(self, key: int, data: T = None):
        self.key = key
        self.data = data

    def get_key(self) -> int:
        return self.key

    def set_key(self, key: int) -> None:
        self.key = key

    def get_data(self) -> T:
        return self.data

    def set_data(self, data: T) -> None:
        self.data = data

    def copy(self) -> "HeapElement[T]":
        # payload is opaque, so it is shared rather than deep-copied
        return HeapElement(self.key, self.data)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HeapElement):
            return NotImplemented
        return self.key == other.key and self.data == other.data

    # mutable key, so not hashable
    __hash__ = None

    def __repr__(self) -> str:
        return f"HeapElement(key={self.key!r}, data={self.data!r})"

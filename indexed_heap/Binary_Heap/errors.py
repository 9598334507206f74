"""
Error taxonomy for the binary heap.

Every heap error derives from HeapError and carries an ErrorKind tag in its
`kind` attribute, so callers can either catch a specific class or dispatch
on `err.kind`.
"""

from enum import Enum


class ErrorKind(Enum):
    INVALID_CAPACITY = "invalid_capacity"
    HEAP_FULL = "heap_full"
    HEAP_EMPTY = "heap_empty"
    INVALID_INDEX = "invalid_index"
    INVALID_ARGUMENT = "invalid_argument"


class HeapError(Exception):
    """
    Base class for all heap errors.
    """
    kind: ErrorKind = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidCapacity(HeapError, ValueError):
    """Negative (or non-integer) capacity supplied at construction."""
    kind = ErrorKind.INVALID_CAPACITY


class HeapFull(HeapError):
    """Insert attempted when size == capacity."""
    kind = ErrorKind.HEAP_FULL


class HeapEmpty(HeapError):
    """Max requested from a heap with size == 0."""
    kind = ErrorKind.HEAP_EMPTY


class InvalidIndex(HeapError, IndexError):
    """Index outside [1, size]."""
    kind = ErrorKind.INVALID_INDEX


class InvalidArgument(HeapError, ValueError):
    """Non-positive delta, or k outside [1, size]."""
    kind = ErrorKind.INVALID_ARGUMENT

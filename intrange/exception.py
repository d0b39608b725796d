__all__ = [
    "RangeException",
    "InvalidStateError",
    "SequenceExhausted",
]

class RangeException(Exception):
    """Base class for all run-time exceptions in this library."""

class InvalidStateError(RangeException):
    """A traversal was asked to remove() an element it cannot remove.

    This happens either because next() has not been called yet, or because
    the element under the cursor has already been removed.
    """

# StopIteration comes first so that a for loop treats this as the end
class SequenceExhausted(StopIteration, RangeException):
    """next() was called on a traversal with no elements left."""

__all__ = [
    "Range", "Direction", "FORWARD", "REVERSE",
    "ForwardTraversal", "ReverseTraversal", "Traversal",
    "RangeException", "InvalidStateError", "SequenceExhausted",
]

from intrange.exception import RangeException, InvalidStateError, SequenceExhausted
from intrange.range import Direction, Range
from intrange.traversal import ForwardTraversal, ReverseTraversal, Traversal

FORWARD = Direction.FORWARD
REVERSE = Direction.REVERSE

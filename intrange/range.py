__all__ = ["Direction", "Range"]

import enum
import numbers

from intrange.membership import MembershipRecord
from intrange.traversal import *
from intrange.utils import typename

class Direction(enum.IntEnum):
    FORWARD = 1
    REVERSE = -1

    # Python 3.11 changes IntEnum.__str__()
    __str__ = enum.Enum.__str__

class Range:
    """A closed interval of integers that may be traversed in either direction.

    The constructor accepts the two bounds in either order; both are
    inclusive, and they cannot be changed after construction. Calling
    :meth:`iterator` (or simply iterating over the Range) produces a new
    traversal, which may be used to remove elements as it goes. Removals
    are permanent, and every traversal created afterwards, in either
    direction, will skip over them.

    The bounds are immutable, and may safely be read from any thread.
    Nothing else is synchronized, however, so removing elements or changing
    the direction from more than one thread at a time is left to the caller
    to coordinate.
    """

    traversalTypes = {
        Direction.FORWARD: ForwardTraversal,
        Direction.REVERSE: ReverseTraversal,
    }

    def __init__(self, a: int, b: int) -> None:
        for bound in (a, b):
            if not isinstance(bound, numbers.Integral):
                raise TypeError(f"Range bounds must be integers, not {typename(bound)}")

        self._lower = int(min(a, b))
        self._upper = int(max(a, b))
        self._direction = Direction.FORWARD
        self.present = MembershipRecord(self._lower, self._upper)

    @property
    def lowerBound(self) -> int:
        return self._lower

    @property
    def upperBound(self) -> int:
        return self._upper

    @property
    def direction(self) -> Direction:
        return self._direction

    def setDirection(self, direction) -> None:
        """Choose the direction of traversals created after this call.

        The argument may be a :class:`Direction`, or a bool, in which case
        True selects :attr:`Direction.REVERSE`. Traversals that already
        exist are not affected.
        """
        if isinstance(direction, Direction):
            self._direction = direction
        elif direction:
            self._direction = Direction.REVERSE
        else:
            self._direction = Direction.FORWARD

    def iterator(self) -> Traversal:
        """Create a new traversal in the current direction."""
        return self.traversalTypes[self.direction](self.present)

    def __iter__(self):
        return self.iterator()

    def __reversed__(self):
        return ReverseTraversal(self.present)

    def __contains__(self, value):
        return value in self.present

    def __len__(self):
        """Count the elements that have not been removed."""
        return self.present.count()

    def __eq__(self, other):
        try:
            result = (self.present == other.present)
        except AttributeError:
            return NotImplemented
        else:
            return result

    def __repr__(self):
        return f"{typename(self)}({self.lowerBound}, {self.upperBound})"

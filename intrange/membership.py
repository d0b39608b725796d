__all__ = ["MembershipRecord"]

import numbers

from intrange.utils import typename

class MembershipRecord:
    """Track which integers of a closed interval are still present.

    The record holds one flag for each integer from lower to upper,
    inclusive. Every flag starts out "present", and the only mutation
    allowed is to mark a flag "removed"; once removed, an integer stays
    removed for the lifetime of the record. The size of the record is fixed
    at construction.

    A record is meant to be owned by a single :class:`~intrange.Range` and
    shared by every traversal that Range produces. It performs no locking of
    any kind, so concurrent calls to :meth:`remove` from multiple threads
    are the caller's responsibility.
    """

    def __init__(self, lower: int, upper: int) -> None:
        if upper < lower:
            raise ValueError(f"Empty interval: [{lower}, {upper}]")

        self._lower = lower
        self._upper = upper
        self._removed = bytearray(upper - lower + 1)

    @property
    def lower(self) -> int:
        return self._lower

    @property
    def upper(self) -> int:
        return self._upper

    def __contains__(self, value):
        """Indicate that value is in the interval and has not been removed."""
        if not isinstance(value, numbers.Integral):
            return False

        return self.inBounds(value) and not self._removed[value - self.lower]

    def __len__(self):
        """Report the fixed size of the record, including removed entries."""
        return len(self._removed)

    def __iter__(self):
        """Yield the present integers in ascending order."""
        for index, removed in enumerate(self._removed):
            if not removed:
                yield self.lower + index

    def __eq__(self, other):
        try:
            result = (
                self.lower == other.lower
                and self.upper == other.upper
                and self._removed == other._removed
            )
        except AttributeError:
            return NotImplemented
        else:
            return result

    def __repr__(self):
        return f"{typename(self)}({self.lower}, {self.upper})"

    def count(self) -> int:
        """Return the number of integers that are still present."""
        return len(self) - sum(self._removed)

    def inBounds(self, value: int) -> bool:
        return self.lower <= value <= self.upper

    def removed(self, value: int) -> bool:
        """Indicate that value is in the interval and has been removed.

        Values outside the interval are never considered removed, which
        lets a traversal probe one step past either end without any special
        case.
        """
        return self.inBounds(value) and bool(self._removed[value - self.lower])

    def remove(self, value: int) -> None:
        """Mark value as removed; removing it again has no further effect."""
        if not self.inBounds(value):
            errmsg = f"{value} is outside of [{self.lower}, {self.upper}]"
            raise IndexError(errmsg)

        self._removed[value - self.lower] = 1

__all__ = ["Traversal", "ForwardTraversal", "ReverseTraversal"]

import logging

from intrange.exception import *
from intrange.membership import MembershipRecord
from intrange.utils import typename

log = logging.getLogger(__name__)

class Traversal:
    """Walk a MembershipRecord one step at a time, skipping removed entries.

    A traversal owns nothing but its cursor. The record it walks belongs to
    the Range that created it, and is shared with every other traversal
    over the same Range, so a call to :meth:`remove` is visible to all of
    them as soon as it returns.

    The cursor begins on a sentinel just outside the interval, one step
    "behind" the first element in the direction of travel. Each call to
    :meth:`next` moves it one step (the value of ``step``) and returns the
    integer it lands on. A traversal makes a single pass and cannot be
    restarted; ask the Range for a new one instead.

    Subclasses pick the direction by setting ``step`` to +1 or -1.
    """

    step = 0

    def __init__(self, record: MembershipRecord) -> None:
        if self.step not in (1, -1):
            raise TypeError(f"{typename(self)} does not define a valid step")

        self.record = record
        self.cursor = self.sentinel

    def __iter__(self):
        return self

    def __next__(self):
        return self.next()

    def __repr__(self):
        return f"<{typename(self)} over {self.record!r} at {self.cursor}>"

    @property
    def first(self) -> int:
        """The first integer this traversal visits, absent any removals."""
        return self.record.lower if self.step > 0 else self.record.upper

    @property
    def last(self) -> int:
        """The last integer this traversal visits, absent any removals."""
        return self.record.upper if self.step > 0 else self.record.lower

    @property
    def sentinel(self) -> int:
        return self.first - self.step

    def started(self) -> bool:
        """Indicate whether the cursor has moved past the sentinel."""
        return (self.cursor - self.sentinel) * self.step > 0

    def hasNext(self) -> bool:
        """Indicate that a call to next() will succeed.

        Any removed integers directly ahead of the cursor are skipped over
        first, and the skip is permanent, even if next() is never called.
        """
        while self.record.removed(self.cursor + self.step):
            self.cursor += self.step

        return (self.last - self.cursor) * self.step > 0

    def next(self) -> int:
        """Advance to and return the next present integer.

        :raises SequenceExhausted: if there are no integers left to visit.
        """
        if not self.hasNext():
            raise SequenceExhausted()

        self.cursor += self.step
        return self.cursor

    def remove(self) -> None:
        """Remove the integer most recently returned by next().

        :raises InvalidStateError:
            if next() has not been called yet, or if the integer under the
            cursor has already been removed (whether by this traversal or
            by any other traversal over the same record).
        """
        if not self.started():
            errmsg = "You need to call next() at least once to remove an element"
            log.debug("%s: %s", typename(self), errmsg)
            raise InvalidStateError(errmsg)

        if self.record.removed(self.cursor):
            errmsg = f"{self.cursor} has already been removed;" \
                " call next() before calling remove() again"
            log.debug("%s: %s", typename(self), errmsg)
            raise InvalidStateError(errmsg)

        self.record.remove(self.cursor)
        log.debug("Removed %d from %r", self.cursor, self.record)

class ForwardTraversal(Traversal):
    step = 1

class ReverseTraversal(Traversal):
    step = -1

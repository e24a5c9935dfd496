"""Cons list: the singly-linked structure shared by program syntax and data.

Each cell holds an optional head value and an optional tail cell. `None` marks
an absent slot; `Nil` is an ordinary value and may sit in a head slot. A cell
without a head never has a tail, so a list is either fully empty or has a value
at every position up to its end.

Lists have value semantics: `copy()` clones the whole structure, and the
builtins always splice into copies rather than into their operands.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterable, Iterator, Optional

from lispy import LispValue
from lispy.errors import LispyStructuralError
from lispy.types.nil import Nil


class ConsList:
    """A chain of cons cells. The first cell stands for the whole list."""

    __slots__ = ("head", "tail")

    def __init__(self, head: LispValue | None = None, tail: Optional[ConsList] = None):
        if head is None and tail is not None:
            raise LispyStructuralError("List cell has a tail but no head")
        self.head: LispValue | None = head
        self.tail: Optional[ConsList] = tail

    @classmethod
    def from_iterable(cls, values: Iterable[LispValue]) -> ConsList:
        result = cls()
        last: Optional[ConsList] = None
        for value in values:
            if last is None:
                result.head = value
                last = result
            else:
                last.tail = cls(value)
                last = last.tail
        return result

    # --- Structure ---
    def _cells(self) -> Iterator[ConsList]:
        cell: Optional[ConsList] = self
        while cell is not None and cell.head is not None:
            yield cell
            cell = cell.tail

    def _last_cell(self) -> ConsList:
        last = self
        for cell in self._cells():
            last = cell
        return last

    def empty(self) -> bool:
        return self.head is None and self.tail is None

    def size(self) -> int:
        """Number of values in the list, counted by walking the chain."""
        n = 0
        for _ in self._cells():
            n += 1
        return n

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[LispValue]:
        for cell in self._cells():
            yield cell.head

    # --- Access ---
    def front(self) -> LispValue:
        return Nil if self.head is None else self.head

    def rest(self) -> ConsList:
        """A copy of everything after the first value."""
        if self.tail is None:
            return ConsList()
        return self.tail.copy()

    def nth(self, idx: int) -> LispValue:
        """The value at `idx`, or Nil when the list is shorter."""
        for i, value in enumerate(self):
            if i == idx:
                return value
        return Nil

    # --- Mutation ---
    def push_back(self, value: LispValue) -> None:
        if self.head is None:
            if self.tail is not None:
                raise LispyStructuralError("List cell has a tail but no head")
            self.head = value
            return
        self._last_cell().tail = ConsList(value)

    def extend(self, other: ConsList) -> None:
        """Splice a copy of `other` onto the end of this list."""
        if other.empty():
            return
        if self.empty():
            copied = other.copy()
            self.head, self.tail = copied.head, copied.tail
            return
        self._last_cell().tail = other.copy()

    def copy(self) -> ConsList:
        """Full structural copy; no cell or nested list is shared."""
        from lispy.types.values import copy_value
        return ConsList.from_iterable(copy_value(v) for v in self)

    # --- Comparison / display ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConsList):
            return NotImplemented
        return all(a == b for a, b in zip_longest(self, other))

    __hash__ = None

    def __repr__(self) -> str:
        from lispy.printer import to_repr
        return to_repr(self)

"""A fixed-capacity tape with a movable head."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Tape(Generic[T]):
    """Storage cells addressed only through a head that moves one cell at a time.

    The head starts one position before the first cell.
    """

    INITIAL_HEAD_POS = -1

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("Capacity cannot be negative")
        self._cells: List[Optional[T]] = [None] * capacity
        self._head_pos = self.INITIAL_HEAD_POS

    @property
    def capacity(self) -> int:
        return len(self._cells)

    def move_head_right(self) -> None:
        self._head_pos += 1

    def move_head_left(self) -> None:
        self._head_pos -= 1

    def head_pos(self) -> int:
        return self._head_pos

    def _check_head(self) -> None:
        if not 0 <= self._head_pos < len(self._cells):
            raise IndexError(f"head position {self._head_pos} is outside the tape")

    def read(self) -> Optional[T]:
        """Return the value under the head."""
        self._check_head()
        return self._cells[self._head_pos]

    def write(self, value: T) -> None:
        """Store a value in the cell under the head."""
        self._check_head()
        self._cells[self._head_pos] = value
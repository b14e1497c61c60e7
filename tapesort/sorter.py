"""In-place sorting of a tape through its handler."""

from __future__ import annotations

from .tape_handler import TapeHandler


def _swap(handler: TapeHandler, i: int, j: int) -> None:
    handler.move_to(i)
    i_val = handler.head()
    handler.move_to(j)
    j_val = handler.head()
    handler.set_head(i_val)
    handler.move_to(i)
    handler.set_head(j_val)


def sort_tape(handler: TapeHandler) -> None:
    """Sort the used cells of a tape in ascending order by selection sort."""
    size = handler.tape_size()
    for i in range(size - 1):
        handler.move_to(i)
        smallest = handler.head()
        smallest_pos = i
        for j in range(i + 1, size):
            handler.move_to(j)
            value = handler.head()
            if value < smallest:
                smallest, smallest_pos = value, j
        _swap(handler, i, smallest_pos)
import random

import pytest

from tapesort.delay_settings import DelaySettings
from tapesort.sorter import sort_tape
from tapesort.tape_handler import FileTapeHandler


def _load(values, limit=None):
    handler = FileTapeHandler(DelaySettings(), len(values) if limit is None else limit)
    handler.read_next_segment(iter(values))
    return handler


def _contents(handler):
    handler.move_to(-1)
    out = []
    for _ in range(handler.tape_size()):
        handler.shift(+1)
        out.append(handler.head())
    return out


@pytest.mark.parametrize(
    "values",
    [
        [3, 1, 2],
        [5, 4, 3, 2, 1],
        [1, 2, 3, 4],
        [2, 2, 1, 1, 2],
        [-7, 0, 7, -2147483648, 2147483647],
    ],
)
def test_sorts_ascending(values):
    handler = _load(values)
    sort_tape(handler)
    assert _contents(handler) == sorted(values)


def test_random_values_keep_multiset_and_order():
    rng = random.Random(1234)
    values = [rng.randint(-1000, 1000) for _ in range(60)]
    handler = _load(values)
    sort_tape(handler)
    result = _contents(handler)
    assert sorted(result) == sorted(values)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_empty_tape_is_untouched():
    handler = _load([], limit=3)
    sort_tape(handler)
    assert _contents(handler) == []


def test_single_value_is_untouched():
    handler = _load([9])
    sort_tape(handler)
    assert _contents(handler) == [9]


def test_only_used_cells_are_sorted():
    handler = FileTapeHandler(DelaySettings(), 4)
    handler.read_next_segment(iter([8, 6, 7, 5]))
    handler.read_next_segment(iter([2, 1]))
    sort_tape(handler)
    assert handler.tape_size() == 2
    assert _contents(handler) == [1, 2]
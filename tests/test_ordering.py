from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytest

from portfolio.domain.ordering import apply_order, display_order, move, next_id


@dataclass
class Row:
    id: int
    sort_order: Optional[int] = None


def test_move_is_a_splice():
    assert move([1, 2, 3, 4], 0, 2) == [2, 3, 1, 4]
    assert move([1, 2, 3, 4], 3, 0) == [4, 1, 2, 3]
    assert move([1, 2, 3], 1, 1) == [1, 2, 3]


def test_move_rejects_out_of_range_indices():
    with pytest.raises(IndexError):
        move([1, 2], 2, 0)
    with pytest.raises(IndexError):
        move([1, 2], 0, -1)


def test_apply_order_ignores_unknown_and_appends_unlisted():
    rows = [Row(1), Row(2), Row(3), Row(4)]
    arranged = apply_order(rows, [3, 99, 1, 3])
    assert [r.id for r in arranged] == [3, 1, 2, 4]


def test_display_order_prefers_explicit_index_then_default():
    rows = [Row(1, None), Row(2, 1), Row(3, 0), Row(4, None)]
    ordered = display_order(rows, "sort_order", lambda items: sorted(items, key=lambda r: -r.id))
    assert [r.id for r in ordered] == [3, 2, 4, 1]


def test_display_order_without_indices_keeps_default_order():
    rows = [Row(2), Row(1)]
    assert [r.id for r in display_order(rows, "sort_order")] == [2, 1]
    assert [r.id for r in display_order(rows, "")] == [2, 1]


def test_next_id_starts_at_one():
    assert next_id([]) == 1
    assert next_id([Row(4), Row(2)]) == 5

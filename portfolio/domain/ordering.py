"""Display-order rules shared by every storage backend."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")


def move(items: Sequence[T], source_index: int, destination_index: int) -> list[T]:
    """Return a copy of ``items`` with one element moved (a drag-and-drop splice)."""
    size = len(items)
    if not 0 <= source_index < size:
        raise IndexError(f"source index {source_index} out of range")
    if not 0 <= destination_index < size:
        raise IndexError(f"destination index {destination_index} out of range")
    result = list(items)
    item = result.pop(source_index)
    result.insert(destination_index, item)
    return result


def apply_order(records: Iterable[T], ordered_ids: Iterable[int], key: Callable[[T], int] = lambda r: r.id) -> list[T]:
    """
    Arrange ``records`` so listed ids come first in the given order.

    Unknown ids are ignored; records whose id is not listed keep their current
    relative order after the listed ones.
    """
    records = list(records)
    position: dict[int, int] = {}
    for record_id in ordered_ids:
        position.setdefault(record_id, len(position))
    listed = sorted((r for r in records if key(r) in position), key=lambda r: position[key(r)])
    rest = [r for r in records if key(r) not in position]
    return listed + rest


def display_order(
    records: Iterable[T],
    order_field: str,
    default_sort: Optional[Callable[[Sequence[T]], list[T]]] = None,
) -> list[T]:
    """Sort records for display: explicit order index first, then the default order."""
    result = default_sort(list(records)) if default_sort else list(records)
    if not order_field:
        return result
    if not any(getattr(r, order_field, None) is not None for r in result):
        return result
    # stable sort keeps the default order among records without an index
    return sorted(
        result,
        key=lambda r: (getattr(r, order_field, None) is None, getattr(r, order_field, None) or 0),
    )


def next_id(records: Iterable[T]) -> int:
    return max((getattr(r, "id", 0) or 0 for r in records), default=0) + 1

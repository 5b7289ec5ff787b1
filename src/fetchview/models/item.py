"""Item rows shown in the view's list."""

from __future__ import annotations

from collections.abc import Iterable

from fetchview.models._base import FetchViewBaseModel


class Item(FetchViewBaseModel):
    """A single list entry; ``id`` is unique within one item list."""

    id: int
    name: str


def ensure_unique_ids(items: Iterable[Item]) -> tuple[Item, ...]:
    """Return *items* as a tuple, raising :class:`ValueError` on a repeated id."""
    seen: set[int] = set()
    result: list[Item] = []
    for item in items:
        if item.id in seen:
            raise ValueError(f"duplicate item id {item.id}")
        seen.add(item.id)
        result.append(item)
    return tuple(result)

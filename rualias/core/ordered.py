"""Insertion-ordered set."""
from typing import Hashable, Iterable, Iterator, MutableSet, TypeVar

H = TypeVar("H", bound=Hashable)


class OrderedSet(MutableSet[H]):
    """Set that iterates in first-insertion order with O(1) membership."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[H] = ()):
        self._items: dict[H, None] = dict.fromkeys(items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[H]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: H) -> None:
        self._items[item] = None

    def discard(self, item: H) -> None:
        self._items.pop(item, None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

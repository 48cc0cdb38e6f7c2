"""
Sequence behaviour for page objects.

A page object matching several elements can be indexed and iterated like a
list of page objects, one per matched element. Every item is an index-bound
clone of the page object, so it stays lazy and keeps the page object's
subclass and child slots.
"""

from __future__ import annotations

import functools
import math
import operator
from typing import Any, Callable, Iterator, Optional, TypeVar

T = TypeVar("T", bound="ArrayAPI")

_MISSING = object()


def clone_with_index(page: T, index: int) -> T:
    """Create a page object matching the index-th element of page.

    The clone has the same class as page, page as its parent and an empty
    selector, so ``page[1]`` renders as ``<page's selector>[1]``.

    Args:
        page: The page object to clone.
        index: Index of the element the clone matches.

    Returns:
        The index-bound clone.
    """
    return type(page)("", page, index)


def _to_index(key: Any) -> Optional[int]:
    """Convert an item key to an integer index, or None if it isn't one."""
    if isinstance(key, bool):
        return None
    if isinstance(key, float):
        return int(key) if key.is_integer() else None
    if isinstance(key, str):
        key = key.strip()
        try:
            return int(key)
        except ValueError:
            pass
        try:
            number = float(key)
        except ValueError:
            return None
        return int(number) if not math.isnan(number) and number.is_integer() else None
    try:
        return operator.index(key)
    except TypeError:
        return None


def _element_of(item: Any) -> Any:
    if isinstance(item, ArrayAPI):
        return item.element
    return item


class ArrayAPI:
    """List-like access to the elements a page object matches.

    Mixed into PageObject. Subclasses may override any of these names; the
    override wins like any other method.
    """

    # Provided by the class this is mixed into.
    element: Any
    elements: list

    def _items(self: T) -> list[T]:
        return [clone_with_index(self, i) for i in range(len(self.elements))]

    def __getitem__(self: T, key: Any) -> Any:
        """Index into the page object.

        An integer key (or an integral float or integer string) returns a
        clone bound to that index, even when no element exists there. A slice
        returns a list of clones for the matched elements. Any other key
        returns None.
        """
        if isinstance(key, slice):
            return self._items()[key]
        index = _to_index(key)
        if index is None:
            return None
        return clone_with_index(self, index)

    def __len__(self) -> int:
        return len(self.elements)

    @property
    def length(self) -> int:
        """Number of matched elements."""
        return len(self.elements)

    def __iter__(self: T) -> Iterator[T]:
        return iter(self._items())

    def __reversed__(self: T) -> Iterator[T]:
        return reversed(self._items())

    def __contains__(self, item: Any) -> bool:
        target = _element_of(item)
        if target is None:
            return False
        return any(element is target for element in self.elements)

    def __bool__(self) -> bool:
        return True

    def map(self: T, fn: Callable[[T], Any]) -> list:
        return [fn(item) for item in self._items()]

    def filter(self: T, predicate: Callable[[T], Any]) -> list[T]:
        return [item for item in self._items() if predicate(item)]

    def find(self: T, predicate: Callable[[T], Any]) -> Optional[T]:
        """Return the first item satisfying predicate, or None."""
        return next((item for item in self._items() if predicate(item)), None)

    def find_index(self: T, predicate: Callable[[T], Any]) -> int:
        """Return the index of the first item satisfying predicate, or -1."""
        for i, item in enumerate(self._items()):
            if predicate(item):
                return i
        return -1

    def index_of(self, item: Any) -> int:
        """Return the index of the element item refers to, or -1.

        Args:
            item: A page object or an element.
        """
        target = _element_of(item)
        if target is None:
            return -1
        for i, element in enumerate(self.elements):
            if element is target:
                return i
        return -1

    def every(self: T, predicate: Callable[[T], Any]) -> bool:
        return all(predicate(item) for item in self._items())

    def some(self: T, predicate: Callable[[T], Any]) -> bool:
        return any(predicate(item) for item in self._items())

    def for_each(self: T, fn: Callable[[T], Any]) -> None:
        for item in self._items():
            fn(item)

    def reduce(self, fn: Callable[[Any, Any], Any], initial: Any = _MISSING) -> Any:
        """Fold the items from first to last.

        Raises:
            TypeError: If there are no items and no initial value.
        """
        if initial is _MISSING:
            return functools.reduce(fn, self._items())
        return functools.reduce(fn, self._items(), initial)

    def reduce_right(self, fn: Callable[[Any, Any], Any], initial: Any = _MISSING) -> Any:
        """Fold the items from last to first."""
        items = self._items()[::-1]
        if initial is _MISSING:
            return functools.reduce(fn, items)
        return functools.reduce(fn, items, initial)

    def sort(
        self: T,
        key: Optional[Callable[[T], Any]] = None,
        reverse: bool = False,
    ) -> list[T]:
        """Return the items sorted by key. The page object is unchanged.

        Page objects have no natural ordering, so without a key the items
        stay in document order (last to first when reverse is set).
        """
        items = self._items()
        if key is None:
            return items[::-1] if reverse else items
        return sorted(items, key=key, reverse=reverse)

    def slice(self: T, start: Optional[int] = None, end: Optional[int] = None) -> list[T]:
        return self._items()[start:end]

    def reverse(self: T) -> list[T]:
        return self._items()[::-1]

    def concat(self, *others: Any) -> list:
        """Return the items followed by others, flattening lists and page objects."""
        result: list = self._items()
        for other in others:
            if isinstance(other, (list, tuple, ArrayAPI)):
                result.extend(other)
            else:
                result.append(other)
        return result

    def entries(self: T) -> Iterator[tuple[int, T]]:
        return enumerate(self._items())

    def keys(self) -> Iterator[int]:
        return iter(range(len(self.elements)))

    def values(self: T) -> Iterator[T]:
        return iter(self._items())

    def to_list(self: T) -> list[T]:
        return self._items()


__all__ = ["ArrayAPI", "clone_with_index"]

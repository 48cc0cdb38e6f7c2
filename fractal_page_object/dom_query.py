"""
DOM queries over selector arrays, with support for intermediate indexing.
"""

from __future__ import annotations

from typing import Optional

from lxml.etree import _Element

from fractal_page_object.dom import (
    ElementLike,
    is_fragment,
    query_selector,
    query_selector_all,
)
from fractal_page_object.selector_array import SelectorArray


def _at(elements: list, index: int) -> Optional[_Element]:
    if 0 <= index < len(elements):
        return elements[index]
    return None


class DOMQuery:
    """A query that resolves a selector array against a root.

    Nothing is cached: every call to ``query()``/``query_all()`` runs against
    the live tree, so mutations between calls are always observed.
    """

    def __init__(
        self,
        root: Optional[ElementLike],
        selector_array: Optional[SelectorArray] = None,
    ) -> None:
        """
        Args:
            root: The element or fragment to query from, or None (never matches).
            selector_array: The path to resolve under the root.
        """
        self.root = root
        self.selector_array = selector_array if selector_array is not None else SelectorArray()

    def query(self) -> Optional[_Element]:
        """Query the first matching element."""
        if self.root is None:
            return None

        scope: Optional[ElementLike] = self.root
        for fragment in self.selector_array:
            if fragment.selector and fragment.index is None:
                scope = query_selector(scope, fragment.selector)
            elif fragment.selector:
                scope = _at(query_selector_all(scope, fragment.selector), fragment.index)
            elif fragment.index != 0 or is_fragment(scope):
                scope = None

            if scope is None:
                return None

        # A fragment is only ever a scope, never a match
        return None if is_fragment(scope) else scope

    def query_all(self) -> list[_Element]:
        """Query all matching elements."""
        if self.root is None:
            return []

        scopes: list = [self.root]
        for fragment in self.selector_array:
            if fragment.selector:
                matches = query_selector_all(scopes[0], fragment.selector)
                if fragment.index is None:
                    scopes = matches
                else:
                    element = _at(matches, fragment.index)
                    scopes = [element] if element is not None else []
            else:
                element = _at(scopes[:1], fragment.index)
                scopes = [element] if element is not None and not is_fragment(element) else []

            if not scopes:
                return []

        return [scope for scope in scopes if not is_fragment(scope)]

    def create_child(self, selector: str, index: Optional[int] = None) -> "DOMQuery":
        """Create a child DOMQuery from a selector and an optional index.

        The selector is appended first, then the index, so the index applies
        to the full result of the (possibly merged) selector.

        Args:
            selector: Selector to query, or ``""`` for none.
            index: Target index in the query results, or None.
        """
        selector_array = self.selector_array.extend(selector)
        if index is not None:
            selector_array = selector_array.extend(index)
        return DOMQuery(self.root, selector_array)

    def __repr__(self) -> str:
        return f"DOMQuery(root={self.root!r}, selector={str(self.selector_array)!r})"


__all__ = ["DOMQuery"]

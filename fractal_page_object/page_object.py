"""
Page objects: lazy, composable descriptions of DOM elements.

A page object is a (selector, parent, index) triple. Nothing is queried until
``element`` or ``elements`` is read; then the parent chain is walked to build
a DOMQuery against the live tree.

Example:
    class ListItem(PageObject):
        link = selector("a")

    class Page(PageObject):
        items = selector("li", ListItem)

    page = Page()
    page.items[1].link.element  # the <a> in the second <li>, or None
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Type, TypeVar, Union

from lxml.etree import _Element

from fractal_page_object.array import ArrayAPI, clone_with_index
from fractal_page_object.dom import ElementLike, is_element_like
from fractal_page_object.dom_query import DOMQuery
from fractal_page_object.errors import InvalidPageObjectClassError, PageObjectError
from fractal_page_object.interfaces import DOMElementDescriptor
from fractal_page_object.root import get_root


P = TypeVar("P", bound="PageObject")

Parent = Union["PageObject", ElementLike, None]


@dataclass(frozen=True)
class PageObjectState:
    """The lookup instructions a page object was created with."""

    selector: str
    parent: Any
    index: Optional[int]


class PageObject(ArrayAPI, DOMElementDescriptor):
    """A lazily evaluated query for DOM elements.

    Subclass to describe a component, declaring children with ``selector()``
    and ``global_selector()``. A page object is also a sequence of index-bound
    page objects, one per matched element (see ArrayAPI).
    """

    def __init__(
        self,
        selector: str = "",
        parent: Parent = None,
        index: Optional[int] = None,
    ) -> None:
        """Initialize PageObject.

        Args:
            selector: Selector relative to the parent. ``""`` matches the
                parent itself.
            parent: Parent page object, an element (or fragment) to anchor
                to, or None to query from the default root.
            index: Index into the elements matched by the selector.
        """
        if not isinstance(selector, str):
            raise TypeError(f"Selector must be a string, got {type(selector).__name__}")
        if parent is not None and not isinstance(parent, PageObject) and not is_element_like(parent):
            raise TypeError(
                f"Parent must be a page object, an element or None, got {type(parent).__name__}"
            )
        if index is not None and (isinstance(index, bool) or not isinstance(index, int)):
            raise TypeError(f"Index must be an integer, got {type(index).__name__}")

        self._fractal_state = PageObjectState(selector, parent, index)

    @property
    def element(self) -> Optional[_Element]:
        """The first matching element, or None."""
        return get_dom_query(self).query()

    @property
    def elements(self) -> list[_Element]:
        """All matching elements, in document order."""
        return get_dom_query(self).query_all()

    @property
    def description(self) -> str:
        """The full selector path, e.g. ``"li[1] a"``."""
        return str(get_dom_query(self).selector_array)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.description!r}>"


def get_dom_query(page: PageObject) -> DOMQuery:
    """Build the DOMQuery a page object resolves through.

    Raises:
        PageObjectError: If page was never initialized as a page object.
    """
    state = getattr(page, "_fractal_state", None)
    if not isinstance(state, PageObjectState):
        raise PageObjectError(
            f"{type(page).__name__} has no page object state; "
            "did a subclass __init__ skip super().__init__()?"
        )

    parent = state.parent
    if isinstance(parent, PageObject):
        return get_dom_query(parent).create_child(state.selector, state.index)
    if parent is not None:
        return DOMQuery(parent).create_child(state.selector, state.index)
    return DOMQuery(get_root()).create_child(state.selector, state.index)


def create_page_object(
    selector: str = "",
    parent: Parent = None,
    index: Optional[int] = None,
    cls: Optional[Type[P]] = None,
) -> P:
    """Create a page object of the given class.

    Args:
        selector: Selector relative to the parent.
        parent: Parent page object, anchor element, or None.
        index: Index into the matched elements.
        cls: PageObject subclass to instantiate (default PageObject).

    Returns:
        The new page object.
    """
    cls = cls or PageObject
    if not isinstance(cls, type) or not issubclass(cls, PageObject):
        raise InvalidPageObjectClassError(f"{cls!r} is not a PageObject subclass")
    return cls(selector, parent, index)


__all__ = [
    "PageObject",
    "PageObjectState",
    "clone_with_index",
    "create_page_object",
    "get_dom_query",
]

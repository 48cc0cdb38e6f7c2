"""
Factories for declaring child page objects as class attributes.

Example:
    class Page(PageObject):
        heading = selector("h1")
        items = selector("li", ListItem)
        modal = global_selector(".modal", Modal)
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Type, Union

from fractal_page_object.config import get_config
from fractal_page_object.dom import ElementLike, is_element_like, validate_selector
from fractal_page_object.errors import InvalidPageObjectClassError, InvalidSelectorError
from fractal_page_object.page_object import PageObject

logger = logging.getLogger(__name__)


def validate_selector_arguments(selector: Any, cls: Optional[type] = None) -> None:
    """Check the arguments of a factory call.

    Args:
        selector: The child's selector.
        cls: The child's class, if any.

    Raises:
        InvalidSelectorError: If the selector is empty, blank, or (when
            ``validate_selectors`` is enabled) cannot be matched.
        InvalidPageObjectClassError: If cls is not a PageObject subclass.
    """
    if not isinstance(selector, str) or not selector.strip():
        raise InvalidSelectorError("Cannot specify an empty selector", str(selector or ""))
    if get_config().validate_selectors:
        validate_selector(selector)
    if cls is not None and not (isinstance(cls, type) and issubclass(cls, PageObject)):
        raise InvalidPageObjectClassError(
            f"Custom class must be a PageObject subclass, got {cls!r}"
        )


class PageObjectFactory:
    """Descriptor that creates a child page object on first access.

    The child is created with the accessing page object as its parent and
    cached in that page object's ``__dict__``, so later reads return the same
    child without calling the descriptor again.
    """

    def __init__(self, selector: str, cls: Optional[Type[PageObject]] = None) -> None:
        self.selector = selector
        self.cls = cls or PageObject
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Optional[PageObject], owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        page = self.create(instance)
        if self.name is not None:
            instance.__dict__[self.name] = page
        return page

    def create(self, parent: Optional[Union[PageObject, ElementLike]]) -> PageObject:
        """Create the child page object under parent."""
        return self.cls(self.selector, parent)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.selector!r}, {self.cls.__name__})"


class GlobalPageObjectFactory(PageObjectFactory):
    """Descriptor for a child that ignores the accessing page object.

    The child is created under a fixed root element, or under the default
    root when no element is given.
    """

    def __init__(
        self,
        selector: str,
        root: Optional[ElementLike] = None,
        cls: Optional[Type[PageObject]] = None,
    ) -> None:
        super().__init__(selector, cls)
        self.root = root

    def create(self, parent: Optional[Union[PageObject, ElementLike]]) -> PageObject:
        return super().create(self.root)


def selector(selector: str, cls: Optional[Type[PageObject]] = None) -> Any:
    """Declare a child page object.

    Args:
        selector: Selector relative to the owning page object.
        cls: PageObject subclass for the child (default PageObject).

    Returns:
        A descriptor to assign as a class attribute.

    Raises:
        InvalidSelectorError: If the selector is empty or invalid.
        InvalidPageObjectClassError: If cls is not a PageObject subclass.
    """
    validate_selector_arguments(selector, cls)
    return PageObjectFactory(selector, cls)


def global_selector(
    selector: str,
    root: Optional[Union[ElementLike, Type[PageObject]]] = None,
    cls: Optional[Type[PageObject]] = None,
) -> Any:
    """Declare a page object that lives outside the owning page object.

    Useful for popovers, modals and other content rendered elsewhere in the
    document. The class may be passed as the second argument when there is
    no root: ``global_selector(".modal", Modal)``.

    Args:
        selector: Selector relative to root.
        root: Element (or fragment) to query under. Defaults to the global
            root, resolved when the page object is queried.
        cls: PageObject subclass for the page object (default PageObject).

    Returns:
        A descriptor to assign as a class attribute.
    """
    if isinstance(root, type):
        if cls is not None:
            raise TypeError("Custom class given twice")
        root, cls = None, root
    if root is not None and not is_element_like(root):
        raise TypeError(f"Root must be an element or fragment, got {type(root).__name__}")
    validate_selector_arguments(selector, cls)
    logger.debug(f"Declared global selector {selector!r}")
    return GlobalPageObjectFactory(selector, root, cls)


__all__ = [
    "GlobalPageObjectFactory",
    "PageObjectFactory",
    "global_selector",
    "selector",
    "validate_selector_arguments",
]

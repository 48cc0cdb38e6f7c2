"""
Helpers for using page objects in tests.
"""

from __future__ import annotations

from typing import Optional

from lxml.etree import _Element

from fractal_page_object.errors import ElementNotFoundError
from fractal_page_object.interfaces import DOMElementDescriptor
from fractal_page_object.page_object import PageObject


def get_description(page: PageObject) -> str:
    """Describe the full selector path a page object resolves through.

    Example:
        get_description(page.items[1].link)  # "li[1] a"

    Raises:
        TypeError: If page is not a page object.
    """
    if not isinstance(page, PageObject):
        raise TypeError(f"Cannot describe a non-page-object: {page!r}")
    return page.description


def assert_exists(message: str, page: PageObject) -> _Element:
    """Return the element a page object matches, or fail with a description.

    Args:
        message: What was expected, shown first in the error.
        page: The page object that must match.

    Returns:
        The matched element.

    Raises:
        ElementNotFoundError: If page matches nothing.
    """
    element = page.element
    if element is None:
        description = get_description(page)
        raise ElementNotFoundError(f"{message} >> Tried selector `{description}`", description)
    return element


def text(descriptor: DOMElementDescriptor) -> Optional[str]:
    """Get the stripped text content of the first described element, or None."""
    element = descriptor.element
    if element is None:
        return None
    return str(element.xpath("string()")).strip()


__all__ = ["assert_exists", "get_description", "text"]

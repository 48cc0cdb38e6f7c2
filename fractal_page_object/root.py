"""
Global default root for page objects.

Page objects without an element or page object parent query from the default
root. Resolution order:

1. the override installed with ``set_root()`` (or ``root_context()``),
2. the first element of the host document matching one of the configured
   ``root_selectors`` (a test harness container such as ``#ember-testing``),
3. the host document's <body>.

The override lives in a ContextVar. Tests should call ``reset_root()`` (or
use ``root_context()``) so one test's root does not leak into the next.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from lxml.etree import _Element

from fractal_page_object.config import get_config
from fractal_page_object.dom import (
    ElementLike,
    get_body,
    get_document,
    is_element_like,
    query_selector,
)
from fractal_page_object.errors import InvalidSelectorError

logger = logging.getLogger(__name__)

_root_override: ContextVar[Optional[ElementLike]] = ContextVar(
    "fractal_page_object_root", default=None
)


def _detect_default_root() -> Optional[_Element]:
    """Find a test harness container in the host document, if any."""
    document_root = get_document().getroot()
    for root_selector in get_config().root_selectors:
        try:
            element = query_selector(document_root, root_selector)
        except InvalidSelectorError as e:
            logger.debug(f"Ignoring invalid root selector {root_selector!r}: {e}")
            continue
        if element is not None:
            logger.debug(f"Using {root_selector!r} as the default root")
            return element
    return None


def set_root(element: ElementLike) -> None:
    """Set the global default root element.

    By default page objects only match elements that are descendants of this
    element. The default root element is the host document's <body>.

    Args:
        element: The root element (or fragment).
    """
    if not is_element_like(element):
        raise TypeError(f"Root must be an element or fragment, got {type(element).__name__}")
    _root_override.set(element)


def get_root() -> ElementLike:
    """Get the global default root element."""
    root = _root_override.get()
    if root is not None:
        return root
    detected = _detect_default_root()
    if detected is not None:
        return detected
    return get_body()


def reset_root() -> None:
    """Reset the global default root element to its default."""
    _root_override.set(None)


@contextmanager
def root_context(element: ElementLike) -> Iterator[ElementLike]:
    """Install a root override for the duration of a ``with`` block.

    The previous override (or its absence) is restored on exit.

    Example:
        with root_context(modal_element):
            assert Page().title.element is not None
    """
    if not is_element_like(element):
        raise TypeError(f"Root must be an element or fragment, got {type(element).__name__}")
    token = _root_override.set(element)
    try:
        yield element
    finally:
        _root_override.reset(token)


__all__ = ["get_root", "reset_root", "root_context", "set_root"]

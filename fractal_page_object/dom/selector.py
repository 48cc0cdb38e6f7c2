"""
Native selector matching for fractal-page-object.

Wraps cssselect (through lxml.cssselect) so that it behaves like the browser
querySelector()/querySelectorAll() pair:

- a selector is matched against the whole tree the scope lives in, and only
  descendants of the scope are returned, in document order;
- a selector using the ``:scope`` pseudo-class is evaluated with the scope
  itself as the context node;
- a selector the parser rejects (typically a leading combinator such as
  ``> li``) is rewritten as ``:scope <selector>`` and evaluated the same way.

Compiled selectors are cached; query results never are.
"""

from __future__ import annotations

import functools
import logging
from typing import NamedTuple, Optional

from cssselect import parse
from cssselect.parser import Pseudo
from lxml import html
from lxml.cssselect import CSSSelector, SelectorError
from lxml.etree import _Element

from fractal_page_object.config import get_config
from fractal_page_object.config.defaults import (
    DEFAULT_SELECTOR_CACHE_SIZE,
    SYNTHETIC_DOCUMENT_HTML,
)
from fractal_page_object.dom.document import ElementLike, is_element, is_fragment
from fractal_page_object.errors import InvalidSelectorError

logger = logging.getLogger(__name__)

SCOPE_PREFIX = ":scope "


def scoped_selector(selector: str) -> str:
    """Prefix a selector with ``:scope`` so leading combinators parse.

    For a selector that is already valid this does not change which
    descendants of the scope match.
    """
    return f"{SCOPE_PREFIX}{selector}"


class CompiledSelector(NamedTuple):
    """A translated selector and how it must be evaluated."""

    selector: str
    matcher: CSSSelector
    scoped: bool


def _uses_scope(tree) -> bool:
    """Whether a parsed selector tree contains the ``:scope`` pseudo-class."""
    if tree is None:
        return False
    if isinstance(tree, Pseudo) and tree.ident.lower() == "scope":
        return True
    return _uses_scope(getattr(tree, "selector", None)) or _uses_scope(
        getattr(tree, "subselector", None)
    )


def _compile(selector: str) -> CompiledSelector:
    """Translate a selector, falling back to its ``:scope``-prefixed form.

    Raises:
        InvalidSelectorError: If neither form can be translated.
    """
    try:
        parsed = parse(selector)
    except SelectorError as e:
        logger.debug(f"Selector {selector!r} rejected ({e}), retrying with :scope")
        compiled_as = scoped_selector(selector)
        scoped = True
    else:
        compiled_as = selector
        scoped = any(_uses_scope(item.parsed_tree) for item in parsed)

    try:
        return CompiledSelector(compiled_as, CSSSelector(compiled_as, translator="html"), scoped)
    except SelectorError as e:
        raise InvalidSelectorError(f"Invalid selector: {selector!r} ({e})", selector) from e


_compile_cached = functools.lru_cache(maxsize=DEFAULT_SELECTOR_CACHE_SIZE)(_compile)


def compile_selector(selector: str) -> CompiledSelector:
    """Compile a selector, using the compiled-selector cache."""
    maxsize = get_config().selector_cache_size
    if _compile_cached.cache_parameters()["maxsize"] != maxsize:
        configure_cache(maxsize)
    return _compile_cached(selector)


def configure_cache(maxsize: int) -> None:
    """Resize (and clear) the compiled-selector cache."""
    global _compile_cached
    _compile_cached = functools.lru_cache(maxsize=maxsize)(_compile)


def clear_cache() -> None:
    """Clear the compiled-selector cache."""
    _compile_cached.cache_clear()


def _scope_element(scope: ElementLike) -> _Element:
    """The element queries are anchored on (a fragment's hidden container)."""
    if is_fragment(scope):
        return scope.container
    return scope


def _is_descendant(element: _Element, ancestor: _Element) -> bool:
    return any(parent is ancestor for parent in element.iterancestors())


def query_selector_all(scope: ElementLike, selector: str) -> list[_Element]:
    """Find all descendants of scope matching selector, in document order.

    Args:
        scope: Element or fragment to search under. It never matches itself.
        selector: CSS selector, possibly starting with a combinator.

    Returns:
        List of matching elements.

    Raises:
        InvalidSelectorError: If the selector cannot be parsed.
    """
    compiled = compile_selector(selector)
    anchor = _scope_element(scope)

    if compiled.scoped:
        # :scope resolves to the context node
        candidates = compiled.matcher(anchor)
    else:
        candidates = compiled.matcher(anchor.getroottree().getroot())

    return [
        element
        for element in candidates
        if is_element(element) and _is_descendant(element, anchor)
    ]


def query_selector(scope: ElementLike, selector: str) -> Optional[_Element]:
    """Find the first descendant of scope matching selector.

    Args:
        scope: Element or fragment to search under.
        selector: CSS selector.

    Returns:
        The first matching element or None.
    """
    elements = query_selector_all(scope, selector)
    return elements[0] if elements else None


@functools.lru_cache(maxsize=1)
def _synthetic_document() -> _Element:
    return html.document_fromstring(SYNTHETIC_DOCUMENT_HTML)


def validate_selector(selector: str) -> str:
    """Check that a selector can be matched, by trial-matching it.

    The selector is accepted when either its literal form or its
    ``:scope``-prefixed form can be evaluated against a synthetic document.

    Args:
        selector: CSS selector to check.

    Returns:
        The selector, unchanged.

    Raises:
        InvalidSelectorError: If the selector is blank or cannot be matched.
    """
    if not selector or not selector.strip():
        raise InvalidSelectorError("Cannot specify an empty selector", selector)

    query_selector_all(_synthetic_document(), selector)
    return selector


__all__ = [
    "CompiledSelector",
    "SCOPE_PREFIX",
    "clear_cache",
    "compile_selector",
    "configure_cache",
    "query_selector",
    "query_selector_all",
    "scoped_selector",
    "validate_selector",
]

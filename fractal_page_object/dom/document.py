"""
Host document for fractal-page-object.

Page objects query a live lxml tree rather than a browser DOM. This module
owns the process-wide host document (whose <body> is the fallback root),
plus the element-less containers (DocumentFragment, ShadowRoot) that can
anchor queries without ever matching as themselves.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, Union

from lxml import etree, html
from lxml.etree import _Element, _ElementTree

from fractal_page_object.config.defaults import DEFAULT_DOCUMENT_HTML

logger = logging.getLogger(__name__)

# Tag of the hidden element that holds a fragment's top-level children. It is
# never returned from a query.
FRAGMENT_CONTAINER_TAG = "document-fragment"

_document: Optional[_ElementTree] = None


def _parse_fragments(markup: str) -> tuple[Optional[str], list[_Element]]:
    """Parse markup into leading text and a list of top-level elements."""
    parts = html.fragments_fromstring(markup)
    leading: Optional[str] = None
    if parts and isinstance(parts[0], str):
        leading = parts.pop(0)
    return leading, [part for part in parts if isinstance(part, _Element)]


def _replace_children(container: _Element, markup: str) -> None:
    for child in list(container):
        container.remove(child)
    leading, elements = _parse_fragments(markup)
    container.text = leading
    for element in elements:
        container.append(element)


class DocumentFragment:
    """Element-less container for a list of top-level elements.

    A fragment can be the parent of a page object or the global root: queries
    run against its descendants, but the fragment itself never matches, not
    even for an empty selector or a ``[0]`` index.

    Example:
        fragment = DocumentFragment.from_html("<li>one</li><li>two</li>")
        PageObject("li", fragment).elements  # both <li> elements
    """

    def __init__(self, elements: Optional[list[_Element]] = None) -> None:
        """Initialize DocumentFragment.

        Args:
            elements: Elements to move into the fragment.
        """
        self._container = html.Element(FRAGMENT_CONTAINER_TAG)
        for element in elements or []:
            self.append(element)

    @classmethod
    def from_html(cls, markup: str) -> "DocumentFragment":
        """Create a DocumentFragment from an HTML fragment string.

        Args:
            markup: HTML fragment to parse.

        Returns:
            DocumentFragment holding the parsed top-level elements.
        """
        fragment = cls()
        _replace_children(fragment._container, markup)
        return fragment

    @property
    def container(self) -> _Element:
        """The hidden element that holds the fragment's children."""
        return self._container

    @property
    def children(self) -> list[_Element]:
        """Get the top-level child elements."""
        return [child for child in self._container if isinstance(child.tag, str)]

    def append(self, element: _Element) -> None:
        """Move an element into the fragment."""
        self._container.append(element)

    def set_html(self, markup: str) -> None:
        """Replace the fragment's content with parsed markup."""
        _replace_children(self._container, markup)

    def __iter__(self) -> Iterator[_Element]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"<{type(self).__name__} children={len(self)}>"


class ShadowRoot(DocumentFragment):
    """Fragment attached to a host element.

    Its content lives outside the host's tree, so selectors evaluated from
    the host document never reach into it, while queries scoped to the shadow
    root see only its own descendants.
    """

    def __init__(
        self,
        host: _Element,
        elements: Optional[list[_Element]] = None,
        mode: str = "open",
    ) -> None:
        """Initialize ShadowRoot.

        Args:
            host: The element that hosts this shadow root.
            elements: Elements to move into the shadow root.
            mode: Shadow DOM mode ('open' or 'closed').
        """
        super().__init__(elements)
        self._host = host
        self._mode = mode

    @classmethod
    def attach(cls, host: _Element, markup: str = "", mode: str = "open") -> "ShadowRoot":
        """Attach a shadow root with parsed content to a host element."""
        root = cls(host, mode=mode)
        _replace_children(root._container, markup)
        return root

    @property
    def host(self) -> _Element:
        """Get the host element."""
        return self._host

    @property
    def mode(self) -> str:
        """Get the shadow DOM mode."""
        return self._mode


ElementLike = Union[_Element, DocumentFragment]


def is_element(obj: Any) -> bool:
    """Whether obj is an lxml element (comments and PIs excluded)."""
    return isinstance(obj, _Element) and isinstance(obj.tag, str)


def is_fragment(obj: Any) -> bool:
    """Whether obj is an element-less container that never matches itself."""
    return isinstance(obj, DocumentFragment)


def is_element_like(obj: Any) -> bool:
    """Whether obj can anchor a query: an element or a fragment.

    Documents are not element-like; use their body (or another element).
    """
    return is_element(obj) or is_fragment(obj)


# Host document


def get_document() -> _ElementTree:
    """Get the host document, creating an empty one on first use."""
    global _document
    if _document is None:
        _document = load_document(DEFAULT_DOCUMENT_HTML)
    return _document


def set_document(document: Union[_ElementTree, _Element]) -> _ElementTree:
    """Replace the host document.

    Args:
        document: A parsed tree, or its root element.

    Returns:
        The installed document tree.
    """
    global _document
    if isinstance(document, _Element):
        document = document.getroottree()
    if not isinstance(document, _ElementTree):
        raise TypeError(f"Expected an lxml document, got {type(document).__name__}")
    _document = document
    return document


def load_document(markup: str) -> _ElementTree:
    """Parse markup into a document and install it as the host document.

    Args:
        markup: Full HTML document. A <head> and <body> are added when missing.

    Returns:
        The installed document tree.
    """
    root = html.document_fromstring(markup, ensure_head_body=True)
    logger.debug("Loaded host document")
    return set_document(root)


def reset_document() -> None:
    """Drop the host document so the next access creates a fresh empty one."""
    global _document
    _document = None


def get_body() -> _Element:
    """Get the host document's <body> element."""
    root = get_document().getroot()
    body = root.find("body")
    if body is None:
        body = etree.SubElement(root, "body")
    return body


def set_body_html(markup: str) -> _Element:
    """Replace the content of the host document's <body>.

    Args:
        markup: HTML fragment to render into the body.

    Returns:
        The body element.
    """
    body = get_body()
    _replace_children(body, markup)
    return body


def set_inner_html(element: Union[_Element, DocumentFragment], markup: str) -> None:
    """Replace an element's (or fragment's) content with parsed markup."""
    if is_fragment(element):
        element.set_html(markup)
    else:
        _replace_children(element, markup)


__all__ = [
    "DocumentFragment",
    "ShadowRoot",
    "ElementLike",
    "FRAGMENT_CONTAINER_TAG",
    "is_element",
    "is_fragment",
    "is_element_like",
    "get_document",
    "set_document",
    "load_document",
    "reset_document",
    "get_body",
    "set_body_html",
    "set_inner_html",
]

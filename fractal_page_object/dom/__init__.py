"""
Host DOM module for fractal-page-object.

This module provides:
- The process-wide host document (an lxml.html tree) and its <body>
- DocumentFragment/ShadowRoot: element-less query anchors
- query_selector/query_selector_all: browser-style matching on top of cssselect
"""

from fractal_page_object.dom.document import (
    FRAGMENT_CONTAINER_TAG,
    DocumentFragment,
    ElementLike,
    ShadowRoot,
    get_body,
    get_document,
    is_element,
    is_element_like,
    is_fragment,
    load_document,
    reset_document,
    set_body_html,
    set_document,
    set_inner_html,
)
from fractal_page_object.dom.selector import (
    SCOPE_PREFIX,
    CompiledSelector,
    clear_cache,
    compile_selector,
    configure_cache,
    query_selector,
    query_selector_all,
    scoped_selector,
    validate_selector,
)

__all__ = [
    # Document
    "DocumentFragment",
    "ShadowRoot",
    "ElementLike",
    "FRAGMENT_CONTAINER_TAG",
    "is_element",
    "is_element_like",
    "is_fragment",
    "get_document",
    "set_document",
    "load_document",
    "reset_document",
    "get_body",
    "set_body_html",
    "set_inner_html",
    # Selector matching
    "SCOPE_PREFIX",
    "CompiledSelector",
    "clear_cache",
    "compile_selector",
    "configure_cache",
    "query_selector",
    "query_selector_all",
    "scoped_selector",
    "validate_selector",
]

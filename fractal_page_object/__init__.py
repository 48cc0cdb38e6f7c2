"""
fractal-page-object: lazy, composable page objects for DOM testing.

Describe a page as a tree of page objects. Each one knows how to find its
elements relative to its parent, and only queries the live tree when its
``element`` or ``elements`` is read, so one page object tree stays valid
while the document changes underneath it.

Basic usage:
    from fractal_page_object import PageObject, selector, set_body_html

    class ListItem(PageObject):
        title = selector(".title")

    class Page(PageObject):
        items = selector("li", ListItem)

    set_body_html("<ul><li><b class='title'>One</b></li><li>Two</li></ul>")
    page = Page()
    len(page.items)                    # 2
    page.items[0].title.element        # <b class="title">
    page.items[1].title.element        # None

Content rendered outside the page object:
    from fractal_page_object import global_selector

    class Page(PageObject):
        modal = global_selector(".modal", Modal)

Scoping queries to a container:
    from fractal_page_object import root_context

    with root_context(container):
        Page().items.elements
"""

__version__ = "0.1.0"
__license__ = "MIT"

from fractal_page_object.array import ArrayAPI
from fractal_page_object.config import (
    PageObjectOptions,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from fractal_page_object.dom import (
    DocumentFragment,
    ShadowRoot,
    get_body,
    get_document,
    is_element_like,
    load_document,
    query_selector,
    query_selector_all,
    reset_document,
    set_body_html,
    set_document,
    validate_selector,
)
from fractal_page_object.dom_query import DOMQuery
from fractal_page_object.errors import (
    ConfigurationError,
    ElementNotFoundError,
    InvalidPageObjectClassError,
    InvalidSelectorError,
    PageObjectError,
)
from fractal_page_object.factory import global_selector, selector
from fractal_page_object.interfaces import DOMElementDescriptor
from fractal_page_object.page_object import (
    PageObject,
    clone_with_index,
    create_page_object,
    get_dom_query,
)
from fractal_page_object.root import get_root, reset_root, root_context, set_root
from fractal_page_object.selector_array import SelectorArray, SelectorFragment
from fractal_page_object.utils import assert_exists, get_description, text

__all__ = [
    # Version
    "__version__",
    # Page objects
    "PageObject",
    "ArrayAPI",
    "DOMElementDescriptor",
    "create_page_object",
    "clone_with_index",
    "get_dom_query",
    "selector",
    "global_selector",
    # Root
    "get_root",
    "set_root",
    "reset_root",
    "root_context",
    # Queries
    "DOMQuery",
    "SelectorArray",
    "SelectorFragment",
    # Host document
    "DocumentFragment",
    "ShadowRoot",
    "get_document",
    "set_document",
    "load_document",
    "reset_document",
    "get_body",
    "set_body_html",
    "is_element_like",
    "query_selector",
    "query_selector_all",
    "validate_selector",
    # Helpers
    "assert_exists",
    "get_description",
    "text",
    # Configuration
    "PageObjectOptions",
    "get_config",
    "set_config",
    "load_config",
    "reset_config",
    # Errors
    "PageObjectError",
    "InvalidSelectorError",
    "InvalidPageObjectClassError",
    "ElementNotFoundError",
    "ConfigurationError",
]

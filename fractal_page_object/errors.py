"""
Exception hierarchy for fractal-page-object.

Missing elements are never errors: queries resolve to ``None`` or ``[]``.
Exceptions are raised only when a page object is defined with bad arguments,
when a selector cannot be parsed, when configuration cannot be loaded, or
when a consumer opts into a fail-fast check with ``assert_exists()``.
"""


class PageObjectError(Exception):
    """Base class for all fractal-page-object errors."""


class InvalidSelectorError(PageObjectError, ValueError):
    """A selector is empty or cannot be parsed.

    When the failure comes from the selector engine, the original
    ``cssselect.SelectorError`` is chained as ``__cause__``.
    """

    def __init__(self, message: str, selector: str = "") -> None:
        super().__init__(message)
        self.selector = selector


class InvalidPageObjectClassError(PageObjectError, TypeError):
    """A custom class passed to a factory is not a PageObject subclass."""


class ElementNotFoundError(PageObjectError, AssertionError):
    """A page object expected to match an element matched nothing."""

    def __init__(self, message: str, description: str) -> None:
        super().__init__(message)
        self.description = description


class ConfigurationError(PageObjectError):
    """Configuration loading or parsing error."""


__all__ = [
    "PageObjectError",
    "InvalidSelectorError",
    "InvalidPageObjectClassError",
    "ElementNotFoundError",
    "ConfigurationError",
]

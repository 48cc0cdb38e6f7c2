"""
Abstract base interfaces for fractal-page-object.

This module defines the capability interface shared by everything that
describes DOM elements lazily, so helpers can accept any implementation.
"""

from abc import ABC, abstractmethod
from typing import Optional

from lxml.etree import _Element


class DOMElementDescriptor(ABC):
    """Abstract base class for lazy descriptions of DOM elements.

    An implementation holds lookup instructions rather than element handles,
    and resolves them against the live tree each time a property is read.
    """

    @property
    @abstractmethod
    def element(self) -> Optional[_Element]:
        """The first described element, or None if nothing matches."""
        ...

    @property
    @abstractmethod
    def elements(self) -> list[_Element]:
        """All described elements, in document order."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable account of how the elements are looked up."""
        ...


__all__ = ["DOMElementDescriptor"]

"""
Selector arrays: the path a page object's query follows from its root.

A selector array is an ordered list of fragments, each a selector with an
optional index. Consecutive selectors without an index between them are
merged into one descendant selector, so ``div`` then ``span`` is the single
fragment ``div span``; an index closes its fragment and starts a new scope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union


@dataclass(frozen=True)
class SelectorFragment:
    """One step of a selector array."""

    selector: str = ""
    index: Optional[int] = None

    def with_index(self, index: int) -> "SelectorFragment":
        return SelectorFragment(self.selector, index)

    def __str__(self) -> str:
        if self.index is None:
            return self.selector
        return f"{self.selector}[{self.index}]"


class SelectorArray:
    """Immutable sequence of selector fragments.

    ``extend()`` never mutates; it returns a new array sharing the unchanged
    fragments.

    Example:
        path = SelectorArray().extend("span").extend(1).extend("strong")
        str(path)  # "span[1] strong"
    """

    __slots__ = ("_fragments",)

    def __init__(self, fragments: tuple[SelectorFragment, ...] = ()) -> None:
        self._fragments = tuple(fragments)

    @property
    def fragments(self) -> tuple[SelectorFragment, ...]:
        return self._fragments

    def extend(self, value: Union[str, int]) -> "SelectorArray":
        """Return a new array with a selector or an index appended.

        Args:
            value: A selector string (``""`` is a no-op) or an integer index.

        Returns:
            The extended selector array.
        """
        if isinstance(value, bool):
            raise TypeError("Cannot extend a selector array with a bool")

        fragments = self._fragments
        last = fragments[-1] if fragments else None

        if isinstance(value, int):
            if last is not None and last.index is None:
                return SelectorArray(fragments[:-1] + (last.with_index(value),))
            return SelectorArray(fragments + (SelectorFragment("", value),))

        if not isinstance(value, str):
            raise TypeError(f"Expected a selector or an index, got {type(value).__name__}")

        if not value:
            return SelectorArray(fragments)
        if last is not None and last.index is None:
            merged = f"{last.selector} {value}".strip()
            return SelectorArray(fragments[:-1] + (SelectorFragment(merged),))
        return SelectorArray(fragments + (SelectorFragment(value),))

    def __iter__(self) -> Iterator[SelectorFragment]:
        return iter(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)

    def __bool__(self) -> bool:
        return bool(self._fragments)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SelectorArray):
            return self._fragments == other._fragments
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._fragments)

    def __str__(self) -> str:
        out = ""
        for fragment in self._fragments:
            if fragment.selector:
                if out:
                    out += " "
                out += fragment.selector
            if fragment.index is not None:
                out += f"[{fragment.index}]"
        return out

    def __repr__(self) -> str:
        return f"SelectorArray({str(self)!r})"


__all__ = ["SelectorArray", "SelectorFragment"]

"""
Configuration options for fractal-page-object.

This module provides the strongly-typed option class that controls default
root detection and selector handling.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from .defaults import (
    DEFAULT_ROOT_SELECTORS,
    DEFAULT_SELECTOR_CACHE_SIZE,
    DEFAULT_VALIDATE_SELECTORS,
)


class PageObjectOptions(BaseModel):
    """Page object configuration options."""

    root_selectors: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ROOT_SELECTORS),
        description="Selectors tried against the host document to find the default root",
    )
    validate_selectors: bool = Field(
        DEFAULT_VALIDATE_SELECTORS,
        description="Trial-match selectors when selector()/global_selector() are called",
    )
    selector_cache_size: int = Field(
        DEFAULT_SELECTOR_CACHE_SIZE,
        gt=0,
        description="Number of compiled selectors kept in memory",
    )

    @field_validator("root_selectors", mode="before")
    @classmethod
    def parse_root_selectors(cls, v: Any) -> Any:
        """Accept a comma-separated string and drop blank entries."""
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, (list, tuple)):
            return [str(item).strip() for item in v if str(item).strip()]
        return v

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageObjectOptions":
        """Create options from dictionary."""
        return cls(**data)

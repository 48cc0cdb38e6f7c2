"""
Default configuration values for fractal-page-object.

This module contains all default values used throughout the configuration system.
"""

from typing import Any

# Root resolution defaults
#
# Selectors tried, in order, against the host document when no root override
# is set. The first match becomes the default root; the document body is used
# when none match. "#ember-testing" is the container Ember's test harness
# renders into.
DEFAULT_ROOT_SELECTORS: list[str] = ["#ember-testing"]

# Selector defaults
DEFAULT_VALIDATE_SELECTORS = True
DEFAULT_SELECTOR_CACHE_SIZE = 256

# Host document defaults
DEFAULT_DOCUMENT_HTML = "<html><head></head><body></body></html>"

# Markup used to trial-match selectors when validating them
SYNTHETIC_DOCUMENT_HTML = "<html><head></head><body><div><span></span></div></body></html>"

# File config defaults
DEFAULT_CONFIG_FILENAME = "fractal-page-object"
DEFAULT_CONFIG_EXTENSIONS = [".json", ".toml"]
DEFAULT_CONFIG_SEARCH_PATHS = [
    ".",
    "~/.config/fractal-page-object",
]

# Environment variable prefix
ENV_PREFIX = "FRACTAL_"


def get_default_options() -> dict[str, Any]:
    """Get default page object options as a dictionary."""
    return {
        "root_selectors": DEFAULT_ROOT_SELECTORS.copy(),
        "validate_selectors": DEFAULT_VALIDATE_SELECTORS,
        "selector_cache_size": DEFAULT_SELECTOR_CACHE_SIZE,
    }

"""
Configuration module for fractal-page-object.

This module provides:
- A strongly-typed option class (PageObjectOptions) validated by Pydantic
- Configuration file loading (JSON, TOML)
- Environment variable support

Example usage:
    from fractal_page_object.config import PageObjectOptions, load_config, set_config

    # Load from file with environment overrides
    set_config(load_config("fractal-page-object.json"))

    # Create programmatically
    set_config(PageObjectOptions(root_selectors=["#app-root"]))

Environment variables:
    FRACTAL_ROOT_SELECTORS=#app-root,#ember-testing
    FRACTAL_VALIDATE_SELECTORS=false
    FRACTAL_SELECTOR_CACHE_SIZE=512
"""

from ..errors import ConfigurationError
from .defaults import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_ROOT_SELECTORS,
    DEFAULT_SELECTOR_CACHE_SIZE,
    DEFAULT_VALIDATE_SELECTORS,
    ENV_PREFIX,
    get_default_options,
)
from .env import (
    ENV_MAPPINGS,
    get_env,
    get_env_key,
    load_env_config,
)
from .loader import (
    find_config_file,
    get_config,
    load_config,
    load_file,
    reset_config,
    set_config,
)
from .options import PageObjectOptions

__all__ = [
    # Defaults
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_ROOT_SELECTORS",
    "DEFAULT_SELECTOR_CACHE_SIZE",
    "DEFAULT_VALIDATE_SELECTORS",
    "ENV_PREFIX",
    "get_default_options",
    # Environment
    "ENV_MAPPINGS",
    "get_env",
    "get_env_key",
    "load_env_config",
    # Loader
    "ConfigurationError",
    "find_config_file",
    "get_config",
    "load_config",
    "load_file",
    "reset_config",
    "set_config",
    # Options
    "PageObjectOptions",
]

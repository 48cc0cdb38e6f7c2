"""
Environment variable support for fractal-page-object configuration.

Every option can be set through a ``FRACTAL_``-prefixed variable:

    FRACTAL_ROOT_SELECTORS       comma-separated list of selectors
    FRACTAL_VALIDATE_SELECTORS   true/false, 1/0, yes/no, on/off
    FRACTAL_SELECTOR_CACHE_SIZE  integer
"""

import logging
import os
from typing import Any, Callable, Optional

from .defaults import ENV_PREFIX

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes", "on", "enabled")


def get_env_key(key: str, prefix: str = ENV_PREFIX) -> str:
    """Map an option name to its environment variable.

    ``root_selectors`` becomes ``FRACTAL_ROOT_SELECTORS``; dots and dashes
    turn into underscores.
    """
    return f"{prefix}{key.upper().replace('.', '_').replace('-', '_')}"


def parse_bool(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


def parse_list(value: str) -> list[str]:
    """Split a comma-separated value, dropping blank items."""
    return [item.strip() for item in value.split(",") if item.strip()]


def get_env(
    key: str,
    default: Any = None,
    parser: Optional[Callable[[str], Any]] = None,
    prefix: str = ENV_PREFIX,
) -> Any:
    """Read an option from the environment.

    Args:
        key: Option name (e.g. "validate_selectors").
        default: Returned when the variable is unset.
        parser: Converts the raw string. Without one the string is returned.
        prefix: Environment variable prefix.

    Returns:
        The parsed value, or default.
    """
    value = os.environ.get(get_env_key(key, prefix))
    if value is None:
        return default
    return parser(value) if parser is not None else value


# Option name -> parser for its environment variable
ENV_MAPPINGS: dict[str, Callable[[str], Any]] = {
    "root_selectors": parse_list,
    "validate_selectors": parse_bool,
    "selector_cache_size": int,
}


def load_env_config(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Collect the options set in the environment.

    Unset variables are left out, so the result can be merged over
    file-based configuration without clobbering it.

    Raises:
        ValueError: If a variable holds a value its parser rejects.
    """
    result: dict[str, Any] = {}

    for option, parser in ENV_MAPPINGS.items():
        value = get_env(option, parser=parser, prefix=prefix)
        if value is None:
            continue
        result[option] = value
        logger.debug(f"Loaded {option} from {get_env_key(option, prefix)}")

    return result

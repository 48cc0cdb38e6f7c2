"""
Configuration loading for fractal-page-object.

Options are merged from, lowest priority first: built-in defaults, a
``fractal-page-object.json``/``.toml`` file, ``FRACTAL_*`` environment
variables, and programmatic overrides. The merged options become the
process-wide active configuration the first time ``get_config()`` is called.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..errors import ConfigurationError
from .defaults import (
    DEFAULT_CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_SEARCH_PATHS,
    get_default_options,
)
from .env import load_env_config
from .options import PageObjectOptions

logger = logging.getLogger(__name__)

_active_config: Optional[PageObjectOptions] = None


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _read_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


_READERS = {
    ".json": (_read_json, json.JSONDecodeError),
    ".toml": (_read_toml, tomllib.TOMLDecodeError),
}


def load_file(path: Union[str, Path]) -> dict[str, Any]:
    """Read option values from a JSON or TOML file.

    Args:
        path: File to read. The extension selects the format.

    Returns:
        The option values found in the file.

    Raises:
        ConfigurationError: If the file is missing, has an unknown extension,
            cannot be decoded, or does not hold a table/object at top level.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()
    if suffix not in _READERS:
        raise ConfigurationError(f"Unsupported configuration format: {suffix}")

    reader, decode_error = _READERS[suffix]
    try:
        data = reader(path)
    except decode_error as e:
        raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")
    return data


def find_config_file(
    filename: str = DEFAULT_CONFIG_FILENAME,
    search_paths: Optional[list[str]] = None,
    extensions: Optional[list[str]] = None,
) -> Optional[Path]:
    """Look for the first existing config file.

    Directories are searched in order, and every extension is tried in each
    directory before moving to the next one.

    Returns:
        The file's path, or None.
    """
    for directory in search_paths if search_paths is not None else DEFAULT_CONFIG_SEARCH_PATHS:
        base = Path(directory).expanduser()
        for ext in extensions if extensions is not None else DEFAULT_CONFIG_EXTENSIONS:
            candidate = base / f"{filename}{ext}"
            if candidate.exists():
                return candidate
    return None


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
    search_paths: Optional[list[str]] = None,
) -> PageObjectOptions:
    """Build options from every configuration source.

    Args:
        config_file: File to read. When omitted the search paths are scanned
            for ``fractal-page-object.json``/``.toml``.
        overrides: Option values that win over every other source.
        load_env: Whether to read ``FRACTAL_*`` environment variables.
        search_paths: Directories to scan when no file is given.

    Returns:
        The merged options. They are not activated; pass them to
        ``set_config()`` for that.

    Raises:
        ConfigurationError: If a source cannot be read or holds invalid values.
    """
    merged = get_default_options()

    path = Path(config_file) if config_file else find_config_file(search_paths=search_paths)
    if path is not None:
        logger.debug(f"Loading configuration from {path}")
        merged.update(load_file(path))

    if load_env:
        try:
            merged.update(load_env_config())
        except ValueError as e:
            raise ConfigurationError(f"Invalid environment configuration: {e}") from e

    merged.update(overrides or {})

    try:
        return PageObjectOptions.from_dict(merged)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def get_config() -> PageObjectOptions:
    """Get the active configuration, loading it on first use."""
    global _active_config
    if _active_config is None:
        _active_config = load_config()
    return _active_config


def set_config(options: PageObjectOptions) -> None:
    """Make options the active configuration."""
    global _active_config
    _active_config = options


def reset_config() -> None:
    """Forget the active configuration; the next get_config() reloads it."""
    global _active_config
    _active_config = None

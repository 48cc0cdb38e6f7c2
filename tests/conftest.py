"""Shared fixtures for fractal-page-object tests."""

import pytest

from fractal_page_object import reset_config, reset_document, reset_root
from fractal_page_object.dom import clear_cache


@pytest.fixture(autouse=True)
def clean_state():
    """Give every test a fresh host document, root and configuration."""
    reset_root()
    reset_document()
    reset_config()
    clear_cache()
    yield
    reset_root()
    reset_document()
    reset_config()
    clear_cache()

"""Shared test fixtures."""

import pytest

from notecontent.config import get_settings
from notecontent.markdown.parser import Parser, get_parser


@pytest.fixture(autouse=True)
def _reset_cached_settings():
    """Drop cached settings and the shared parser around every test."""
    get_settings.cache_clear()
    get_parser.cache_clear()
    yield
    get_settings.cache_clear()
    get_parser.cache_clear()


@pytest.fixture
def parser() -> Parser:
    return Parser()

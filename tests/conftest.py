"""Shared pytest fixtures for viewkit tests.

This module provides fixtures for:
- Environment configuration with cached settings reset
- Capability doubles built on unittest.mock
- Hand-written element doubles from tests.support.doubles

Usage:
    @pytest.mark.unit
    def test_something(displayed_label):
        assert displayed_label.is_displayed()
"""

import os
from collections.abc import Callable, Generator
from unittest.mock import MagicMock

import pytest

from tests.support.doubles import AlwaysDisplayedLabel, NeverDisplayedElement
from viewkit.core.capabilities import Composite, Discoverable, View

# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables.

    Loads .env file first, then sets defaults for any missing variables.
    """
    from dotenv import load_dotenv

    original_env = os.environ.copy()

    load_dotenv()

    os.environ.setdefault("VIEWKIT_LOG_LEVEL", "DEBUG")

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make every test read settings from its own environment."""
    from viewkit.config.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Element Doubles
# =============================================================================


@pytest.fixture
def displayed_label() -> AlwaysDisplayedLabel:
    """Provide an element that is always present and displayed."""
    return AlwaysDisplayedLabel()


@pytest.fixture
def hidden_element() -> NeverDisplayedElement:
    """Provide an element that is never displayed."""
    return NeverDisplayedElement()


# =============================================================================
# Capability Mocks
# =============================================================================


@pytest.fixture
def mock_view() -> Callable[[bool], MagicMock]:
    """Factory for View mocks whose is_loaded returns the given value."""

    def _make(loaded: bool) -> MagicMock:
        mock = MagicMock(spec=View)
        mock.is_loaded.return_value = loaded
        return mock

    return _make


@pytest.fixture
def mock_composite() -> Callable[[bool], MagicMock]:
    """Factory for Composite mocks whose is_displayed returns the given value."""

    def _make(displayed: bool) -> MagicMock:
        mock = MagicMock(spec=Composite)
        mock.is_displayed.return_value = displayed
        return mock

    return _make


@pytest.fixture
def mock_findable() -> Callable[[bool], MagicMock]:
    """Factory for Discoverable mocks whose is_present returns the given value."""

    def _make(present: bool) -> MagicMock:
        mock = MagicMock(spec=Discoverable)
        mock.is_present.return_value = present
        return mock

    return _make

"""Unit tests for logging configuration."""

import logging
import os
from collections.abc import Generator
from typing import Annotated
from unittest.mock import patch

import pytest
import structlog

from tests.support.doubles import NeverDisplayedElement
from viewkit.config.logging import ROOT_LOGGER, configure_logging
from viewkit.config.settings import get_settings
from viewkit.core.aggregation import evaluate
from viewkit.core.capabilities import Composite
from viewkit.core.declarations import Require

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Put structlog and the viewkit logger back the way the session had them."""
    saved = structlog.get_config()
    logger = logging.getLogger(ROOT_LOGGER)
    level, handlers = logger.level, list(logger.handlers)
    yield
    structlog.configure(**saved)
    logger.handlers[:] = handlers
    logger.setLevel(level)


def _viewkit_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger(ROOT_LOGGER).handlers if h.get_name() == "viewkit-structlog"]


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_level_defaults_to_settings(self) -> None:
        with patch.dict(os.environ, {"VIEWKIT_LOG_LEVEL": "WARNING"}, clear=True):
            get_settings.cache_clear()
            logger = configure_logging()

        assert logger.name == "viewkit"
        assert logger.level == logging.WARNING

    def test_explicit_level_overrides_settings(self) -> None:
        with patch.dict(os.environ, {"VIEWKIT_LOG_LEVEL": "WARNING"}, clear=True):
            get_settings.cache_clear()
            logger = configure_logging("DEBUG")

        assert logger.level == logging.DEBUG

    def test_reconfiguring_keeps_one_handler(self) -> None:
        configure_logging()
        configure_logging()

        assert len(_viewkit_handlers()) == 1

    @pytest.mark.parametrize(
        ("debug", "renderer"),
        [("true", structlog.dev.ConsoleRenderer), ("false", structlog.processors.JSONRenderer)],
    )
    def test_renderer_follows_debug_flag(self, debug: str, renderer: type) -> None:
        with patch.dict(os.environ, {"VIEWKIT_DEBUG": debug}, clear=True):
            get_settings.cache_clear()
            configure_logging()

        (handler,) = _viewkit_handlers()
        assert isinstance(handler.formatter.processors[-1], renderer)

    def test_aggregation_events_reach_caplog(self, caplog: pytest.LogCaptureFixture) -> None:
        """
        Given: Logging configured at DEBUG
        When: A view with a hidden required part is evaluated
        Then: The unsatisfied part is logged under the viewkit logger tree
        """

        class CheckoutView:
            pay_button: Annotated[Composite, Require] = NeverDisplayedElement()

        configure_logging("DEBUG")
        caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER)

        evaluate(CheckoutView())

        events = [
            record.msg
            for record in caplog.records
            if record.name == "viewkit.core.aggregation" and isinstance(record.msg, dict)
        ]
        assert any(
            event["event"] == "required_part_unsatisfied" and event["part"] == "pay_button"
            for event in events
        )

    def test_info_level_hides_debug_events(self, caplog: pytest.LogCaptureFixture) -> None:
        class CheckoutView:
            pay_button: Annotated[Composite, Require] = NeverDisplayedElement()

        configure_logging("INFO")

        evaluate(CheckoutView())

        assert not [r for r in caplog.records if r.name.startswith("viewkit.")]

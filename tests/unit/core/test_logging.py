"""Unit tests for i18nkit.core.logging module."""

import logging
import sys
from unittest.mock import patch

import pytest
import structlog

from i18nkit.core.logging import (
    _is_test_environment,
    _renderer,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestLoggingConfiguration:
    """Tests for logging configuration."""

    def test_is_test_environment_detects_pytest(self):
        """_is_test_environment returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True

    def test_is_test_environment_without_pytest(self):
        """_is_test_environment returns False when pytest is not loaded."""
        with patch.dict(sys.modules):
            del sys.modules["pytest"]
            assert _is_test_environment() is False

    def test_configure_logging_returns_logger(self):
        """configure_logging returns a logger instance."""
        logger = configure_logging()
        assert logger is not None
        assert hasattr(logger, "bind")

    def test_configure_logging_silences_tests(self):
        """configure_logging suppresses logs in the test environment."""
        configure_logging()
        assert logging.root.level > logging.CRITICAL

    @pytest.mark.parametrize(
        "is_production,renderer",
        [
            (True, structlog.processors.JSONRenderer),
            (False, structlog.dev.ConsoleRenderer),
        ],
    )
    def test_renderer_follows_environment(self, is_production, renderer):
        """Production renders JSON, other environments render for the console."""
        with patch("i18nkit.core.logging.settings") as mock_settings:
            mock_settings.is_production = is_production
            assert isinstance(_renderer(), renderer)

    def test_get_module_logger_binds_module(self):
        """get_module_logger binds the calling module's name."""
        with patch("i18nkit.core.logging.logger") as mock_logger:
            get_module_logger()
        mock_logger.bind.assert_called_once_with(
            component="test_logging", module_path=__name__
        )

"""Fixtures for treelocale.logging tests."""

from unittest.mock import Mock

import pytest
import structlog

from treelocale.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture
def restore_structlog_config():
    """Restore the global structlog configuration after a test."""
    saved = structlog.get_config()
    saved["processors"] = list(saved["processors"])
    yield
    structlog.configure(**saved)

"""Shared pytest configuration and fixtures for all tests."""

import pytest

from qalink.utils import reset_logging


def pytest_configure(config):
    for marker in ("unit", "integration", "uid", "link", "utils"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def clean_logging():
    """Undo any handlers configure_logging installed during a test."""
    reset_logging()
    yield
    reset_logging()

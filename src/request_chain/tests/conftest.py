# ABOUTME: pytest configuration for request chain tests
# ABOUTME: Configures timeouts, markers and a clean settings cache per test

import pytest

from request_chain.config.settings import get_settings


def pytest_configure(config):
    """Configure pytest for request chain tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "contract: Contract tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Check for existing timeout marker - if it exists, respect it
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "contract"]):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

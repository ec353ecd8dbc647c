"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from bizcal.config import reset_bizcal_config


@pytest.fixture(autouse=True)
def reset_bizcal_config_for_all_tests():
    """Reset module-level configuration before and after each test.

    The stepping cap lives in a module-level singleton that persists across
    tests. This fixture ensures each test starts from the defaults.
    """
    reset_bizcal_config()
    yield
    reset_bizcal_config()
    structlog.reset_defaults()

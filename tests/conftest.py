"""Pytest configuration and shared fixtures for the tagdown test suite."""

import logging
import os
from typing import Generator

import pytest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, property tests are skipped
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def restore_package_logger() -> Generator[logging.Logger, None, None]:
    """Restore the tagdown logger after a test reconfigures it."""
    package_logger = logging.getLogger("tagdown")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    try:
        yield package_logger
    finally:
        for handler in package_logger.handlers:
            if handler not in handlers:
                handler.close()
        package_logger.handlers[:] = handlers
        package_logger.setLevel(level)
        package_logger.propagate = propagate

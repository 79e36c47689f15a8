"""Pytest configuration and shared fixtures for the wkpdf test suite.

This module provides shared fixtures and test configuration used across
the entire test suite.
"""

import pytest
from fakes import FakeEngine

from wkpdf.renderer_config import RendererConfig

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)

    # Load profile from environment or use default
    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def engines() -> list:
    """Collect the engines created by the ``engine_factory`` fixture."""
    return []


@pytest.fixture
def engine_factory(engines):
    """Provide an engine factory producing recording FakeEngine instances."""

    def factory(config: RendererConfig) -> FakeEngine:
        engine = FakeEngine(config)
        engines.append(engine)
        return engine

    return factory

"""Pytest configuration and shared fixtures for the tagdown test suite."""

import os

import pytest
from bs4 import BeautifulSoup

from tagdown.context import RenderContext
from tagdown.options import HtmlOptions

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - full HTML to Markdown conversions")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def context() -> RenderContext:
    """Provide a render context with default options."""
    return RenderContext(HtmlOptions())


@pytest.fixture
def first_element():
    """Parse an HTML fragment with html.parser and return its first element."""

    def _parse(html: str):
        soup = BeautifulSoup(html, "html.parser")
        return soup.find(True)

    return _parse

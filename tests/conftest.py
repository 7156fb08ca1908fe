"""Pytest configuration and shared fixtures for the docwriters test suite.

This module registers markers and Hypothesis profiles and provides small
document-building fixtures used by the integration tests.
"""

import os
from typing import Callable

import pytest
from hypothesis import Phase, Verbosity, settings

from docwriters.ast import Document, Paragraph, Plain, Str

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def para() -> Callable[..., Paragraph]:
    """Build a paragraph from plain strings and inline nodes."""

    def _para(*parts) -> Paragraph:
        return Paragraph(content=[Str(part) if isinstance(part, str) else part for part in parts])

    return _para


@pytest.fixture
def plain_item() -> Callable[[str], list]:
    """Build a single-block list item holding one word."""

    def _item(word: str) -> list:
        return [Plain(content=[Str(word)])]

    return _item


@pytest.fixture
def doc_of() -> Callable[..., Document]:
    """Wrap blocks in a Document."""

    def _doc(*blocks) -> Document:
        return Document(children=list(blocks))

    return _doc

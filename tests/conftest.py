"""Global pytest fixtures for SELKIT."""

import pytest

from selkit.domain.builder import SelectorBuilder


@pytest.fixture
def builder() -> SelectorBuilder:
    """Return a fresh selector builder facade."""
    return SelectorBuilder()

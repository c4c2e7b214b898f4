"""Shared fixtures."""

import pytest

from tests.helpers import DeterministicRandomSource


@pytest.fixture
def seeded_random():
    """Reproducible random source."""
    return DeterministicRandomSource()

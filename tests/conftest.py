"""Shared pytest fixtures for facet band color tests."""

from __future__ import annotations

import re

import pytest

from facets import FACET_ORDER, Facet

# ============================================================================
# Color Fixtures
# ============================================================================


@pytest.fixture
def hex_pattern() -> re.Pattern:
    """Lowercase #rrggbb, the engine's output encoding."""
    return re.compile(r"^#[0-9a-f]{6}$")


@pytest.fixture
def score_grid() -> list[float]:
    """Evenly spaced scores across [0, 1], endpoints included."""
    return [i / 20 for i in range(21)]


# ============================================================================
# Facet Fixtures
# ============================================================================


@pytest.fixture
def all_facets() -> tuple[Facet, ...]:
    """All seven facets in spectrum order."""
    return FACET_ORDER

"""Shared pytest fixtures for sqlbuilder unit and integration tests."""
from __future__ import annotations

import pytest

from sqlbuilder import Query


@pytest.fixture
def pg() -> Query:
    """Single-table query using positional placeholders."""
    return Query("t", dialect="pg")


@pytest.fixture
def my() -> Query:
    """Single-table query using unnumbered placeholders."""
    return Query("t", dialect="mysql")


@pytest.fixture(params=["pg", "mysql"])
def any_dialect(request: pytest.FixtureRequest) -> Query:
    """Runs a test once per built-in dialect."""
    return Query("t", dialect=request.param)

"""Pytest fixtures for test suite."""

import pytest

from patterns import (
    Patterns,
    equals_to,
    get_settings,
    or_else,
    patterns,
    sequence_of,
    then,
    then_apply,
    then_supply,
    when,
)


# =============================================================================
# Core Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def full_table() -> Patterns:
    """Integer table covering constants, suppliers, functions and a default."""
    return patterns(
        when(equals_to(3), then("b")),
        when(equals_to(4), then_supply(lambda: "c")),
        when(lambda i: i > 0, then_apply(str)),
        when(lambda i: i < 0, then_apply(sequence_of(lambda i: i + 1, int, str))),
        or_else(then("a")),
    )


@pytest.fixture
def partial_table() -> Patterns:
    """Integer table without a terminal clause; 0 matches nothing."""
    return patterns(
        when(equals_to(3), then("b")),
        when(lambda i: i > 0, then_apply(str)),
        when(lambda i: i < 0, then_apply(str)),
    )

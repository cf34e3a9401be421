"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from bigdecimal import BigDecimal


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration made by a test (the CLI configures it)."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def d():
    """Shorthand parser: d("2.15") -> BigDecimal."""
    return BigDecimal.value_of

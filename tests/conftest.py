"""
Pytest configuration and fixtures for correlation vector tests.
"""

from typing import Callable

import pytest

from correlation_vector.helpers import spin as spin_helpers
from correlation_vector.models.config import Settings


@pytest.fixture(scope="function")
def settings() -> Settings:
    """Settings with validation disabled (the default)."""
    return Settings(VALIDATE_DURING_CREATION=False)


@pytest.fixture(scope="function")
def validating_settings() -> Settings:
    """Settings with validation during creation enabled."""
    return Settings(VALIDATE_DURING_CREATION=True)


@pytest.fixture(scope="function")
def fixed_spin_source(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[int, bytes], None]:
    """Pin the tick and entropy sources used by Spin and Reset."""

    def pin(ticks: int, entropy: bytes) -> None:
        monkeypatch.setattr(spin_helpers, "utc_ticks", lambda: ticks)
        monkeypatch.setattr(spin_helpers, "entropy_bytes", lambda count: entropy[:count])

    return pin

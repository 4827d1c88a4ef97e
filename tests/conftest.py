"""Hypothesis profiles and pytest fixtures for vestledger."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog
from hypothesis import HealthCheck, settings

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


@pytest.fixture
def captured_logs() -> Iterator[list[dict[str, object]]]:
    """Structured log entries emitted during the test."""
    with structlog.testing.capture_logs() as logs:
        yield logs

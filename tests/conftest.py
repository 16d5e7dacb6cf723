# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for dualver tests."""

from __future__ import annotations

from typing import Generator

import pytest
from hypothesis import HealthCheck, settings

from dualver import set_config

settings.register_profile("dualver", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("dualver")


@pytest.fixture(autouse=True)
def default_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test against a configuration built from a clean environment."""
    monkeypatch.delenv("DUALVER_WARN_SINGLE_COMPONENT", raising=False)
    monkeypatch.delenv("DUALVER_STRIP_WHITESPACE", raising=False)
    set_config(None)
    yield
    set_config(None)

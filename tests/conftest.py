"""Pytest configuration and fixtures for TempConvert tests."""

from __future__ import annotations

import pytest

from core.config import AppSettings


@pytest.fixture
def settings() -> AppSettings:
    """Settings independent from the developer's environment."""
    return AppSettings(
        http_timeout_seconds=5.0,
        user_agent="tempconvert-tests",
        blocking_io_workers=2,
        log_level="DEBUG",
    )

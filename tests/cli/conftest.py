"""Fixtures for CLI tests: fake client wiring and logging isolation."""

from __future__ import annotations

import logging

import pytest

import cli.doctor
import cli.main
from core.container import build_container
from tests.doubles import FakeConversionClient


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """`configure_logging` replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fake_client(monkeypatch) -> FakeConversionClient:
    """Wire every CLI container with a fake client instead of the network."""
    client = FakeConversionClient()

    def _build(settings=None, **_kwargs):
        return build_container(settings, client=client)

    monkeypatch.setattr(cli.main, "build_container", _build)
    monkeypatch.setattr(cli.doctor, "build_container", _build)
    return client

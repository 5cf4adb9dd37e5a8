"""Shared pytest fixtures and test helpers for itemctl tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from itemctl.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by AppContext."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    item_logger = logging.getLogger("itemctl")
    item_level = item_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    item_logger.setLevel(item_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep a developer's itemctl.toml or ITEMCTL_* env out of the tests."""
    monkeypatch.delenv("ITEMCTL_CONFIG", raising=False)
    monkeypatch.delenv("ITEMCTL_ITEMS__SEPARATOR", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_items(tmp_path: Path) -> Callable[..., str]:
    """Write a JSON item collection to a temp file and return its path."""
    counter = iter(range(1000))

    def _write(entries: list[Any], name: str | None = None) -> str:
        path = tmp_path / (name or f"items_{next(counter)}.json")
        path.write_text(json.dumps(entries), encoding="utf-8")
        return str(path)

    return _write

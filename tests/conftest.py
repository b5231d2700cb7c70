"""Shared test fixtures for versioncheck."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from versioncheck.models.tools import ToolSpec


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep VERSIONCHECK_* variables and stray .env files out of tests."""
    for key in list(os.environ):
        if key.startswith("VERSIONCHECK_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_tool() -> Callable[..., ToolSpec]:
    """Factory fixture: build a ToolSpec with sensible defaults."""

    def _factory(
        name: str = "FullVersion",
        command: str = "echo 'FullVersion 1.22.3'",
        expect: str = "1.22.3",
    ) -> ToolSpec:
        return ToolSpec(name=name, command=command, expect=expect)

    return _factory


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture: write a tools file and return its path."""

    def _factory(tools: list[dict[str, Any]], name: str = "tools.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump({"tools": tools}), encoding="utf-8")
        return path

    return _factory

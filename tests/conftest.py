"""Shared test fixtures — helpers available to all test modules."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest

from ablscope.core.config import ENV_DEFAULT_PROJECT, ENV_PATH_STYLE


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ABLSCOPE_* variables (including ones loaded from .env) out of other tests."""
    for var in (ENV_DEFAULT_PROJECT, ENV_PATH_STYLE):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)


@pytest.fixture
def info_caplog(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.INFO, logger="ablscope")
    return caplog


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[..., Path]:
    """Write an openedge-project.json under ``tmp_path / rel`` and return its folder."""

    def _write(rel: str, name: str | None = None, **extra: Any) -> Path:
        folder = tmp_path / rel
        folder.mkdir(parents=True, exist_ok=True)
        data: dict[str, Any] = {"version": "1.0", **extra}
        if name is not None:
            data["name"] = name
        (folder / "openedge-project.json").write_text(json.dumps(data), encoding="utf-8")
        return folder

    return _write

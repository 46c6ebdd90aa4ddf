"""Workspace configuration — ``.ablscope.yaml`` plus environment overrides.

The YAML file holds settings that belong to the workspace (default project,
extra folders to scan).  A ``.env`` file next to it is loaded without
overriding variables that are already set, so the shell always wins.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from ablscope.core.models import WorkspaceSettings
from ablscope.core.paths import PathStyle

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = ".ablscope.yaml"
ENV_DEFAULT_PROJECT = "ABLSCOPE_DEFAULT_PROJECT"
ENV_PATH_STYLE = "ABLSCOPE_PATH_STYLE"


def get_settings_path(workspace: Path) -> Path:
    return workspace / SETTINGS_FILE_NAME


def load_settings(workspace: Path) -> WorkspaceSettings:
    """Read workspace settings, applying environment overrides.

    A missing or empty settings file yields defaults.
    """
    load_dotenv(workspace / ".env", override=False)

    path = get_settings_path(workspace)
    data: dict | None = None
    if path.exists():
        logger.debug("Loading workspace settings from %s", path)
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid settings file {path}: {exc}") from exc
        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Settings file must contain a mapping: {path}")

    settings = WorkspaceSettings.model_validate(data or {})

    env_default = os.environ.get(ENV_DEFAULT_PROJECT, "").strip()
    if env_default:
        logger.info("Default project overridden by %s=%s", ENV_DEFAULT_PROJECT, env_default)
        settings = settings.model_copy(update={"default_project": env_default})
    return settings


def get_path_style() -> PathStyle:
    """Return the path style from ``ABLSCOPE_PATH_STYLE`` (default: native)."""
    return PathStyle.from_name(os.environ.get(ENV_PATH_STYLE, "native") or "native")

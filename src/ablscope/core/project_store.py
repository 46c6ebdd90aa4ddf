from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from ablscope.core.models import Project, ProjectProfile

logger = logging.getLogger(__name__)

PROJECT_FILE_NAME = "openedge-project.json"
DEFAULT_PROFILE_NAME = "default"

_SKIPPED_DIRS = {".git", "node_modules", ".venv", ".builder"}


class ProjectConfigError(ValueError):
    """Raised when a project file exists but cannot be turned into a Project."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid project file {path}: {reason}")


def _profile_from_dict(name: str, data: dict[str, Any]) -> ProjectProfile:
    return ProjectProfile(
        name=name,
        oe_version=data.get("oeversion"),
        propath=[
            entry["path"] if isinstance(entry, dict) else str(entry)
            for entry in data.get("propath", [])
        ],
        inherits=data.get("inherits"),
    )


def _project_from_dict(data: dict[str, Any], path: Path) -> Project:
    """Map the JSON layout of an openedge-project.json onto a Project."""
    root = path.resolve().parent
    profiles = [_profile_from_dict(DEFAULT_PROFILE_NAME, data)]
    for entry in data.get("profiles", []):
        profile_name = entry.get("name")
        if not profile_name:
            logger.warning("Skipping unnamed profile in %s", path)
            continue
        profiles.append(_profile_from_dict(profile_name, entry.get("value", {})))

    return Project.model_validate(
        {
            "name": data.get("name") or root.name,
            "root_dir": str(root),
            "version": str(data.get("version", "1.0")),
            "oe_version": data.get("oeversion"),
            "profiles": profiles,
            "active_profile": data.get("activeProfile", DEFAULT_PROFILE_NAME),
            "source_file": str(path),
        }
    )


def load_project(path: Path) -> Project:
    """Read an openedge-project.json and return a validated Project.

    Raises FileNotFoundError when *path* is missing and ProjectConfigError
    when its contents are empty, not UTF-8 JSON, or fail validation.
    """
    logger.debug("Loading project from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as exc:
        raise ProjectConfigError(path, "not valid UTF-8") from exc
    if not content.strip():
        raise ProjectConfigError(path, "file is empty")
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ProjectConfigError(path, f"not valid JSON ({exc.msg})") from exc
    if not isinstance(data, dict):
        raise ProjectConfigError(path, "top-level value must be an object")
    try:
        return _project_from_dict(data, path)
    except (ValidationError, AttributeError, KeyError, TypeError) as exc:
        raise ProjectConfigError(path, str(exc)) from exc


def iter_project_files(folder: Path) -> Iterable[Path]:
    """Yield every project file under *folder*, skipping tool and VCS directories."""
    for base, dirs, files in os.walk(folder, topdown=True):
        dirs[:] = sorted(d for d in dirs if d not in _SKIPPED_DIRS)
        if PROJECT_FILE_NAME in files:
            yield Path(base) / PROJECT_FILE_NAME


def discover_projects(folders: Iterable[Path]) -> list[Project]:
    """Load every valid project found under *folders*, ordered by root path.

    Broken project files are logged and skipped.  When two files declare the
    same project name, the first one found wins.
    """
    by_name: dict[str, Project] = {}
    for folder in folders:
        if not folder.is_dir():
            logger.warning("Workspace folder does not exist: %s", folder)
            continue
        for project_file in iter_project_files(folder):
            try:
                project = load_project(project_file)
            except (OSError, ProjectConfigError) as exc:
                logger.warning("Skipping project file %s: %s", project_file, exc)
                continue
            if project.name in by_name:
                logger.warning(
                    "Duplicate project name '%s' in %s (already loaded from %s)",
                    project.name,
                    project_file,
                    by_name[project.name].source_file,
                )
                continue
            by_name[project.name] = project

    projects = sorted(by_name.values(), key=lambda p: p.root_dir or "")
    logger.debug("Discovered %d project(s)", len(projects))
    return projects

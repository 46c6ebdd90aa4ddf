"""A loaded workspace: its projects, its default project and a resolver."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from ablscope.core.config import get_path_style, load_settings
from ablscope.core.models import Project
from ablscope.core.paths import PathStyle
from ablscope.core.project_store import discover_projects
from ablscope.resolver import ProjectResolver, Resolution

logger = logging.getLogger(__name__)


class Workspace:
    def __init__(
        self,
        projects: Sequence[Project],
        default_project_name: str | None = None,
        path_style: PathStyle | None = None,
    ):
        self.projects = list(projects)
        self.default_project_name = default_project_name
        self.resolver = ProjectResolver(path_style)

    @classmethod
    def open(cls, root: Path, default_project_name: str | None = None) -> Workspace:
        """Discover projects under *root* (and configured extra folders).

        *default_project_name* takes precedence over the workspace settings.
        """
        root = root.resolve()
        settings = load_settings(root)
        folders = [root] + [(root / extra).resolve() for extra in settings.extra_folders]
        projects = discover_projects(folders)
        logger.debug("Opened workspace %s with %d project(s)", root, len(projects))
        return cls(
            projects,
            default_project_name=default_project_name or settings.default_project,
            path_style=get_path_style(),
        )

    def get_project_by_name(self, name: str) -> Project | None:
        for project in self.projects:
            if project.name == name:
                return project
        return None

    @property
    def default_project(self) -> Project | None:
        if not self.default_project_name:
            return None
        return self.get_project_by_name(self.default_project_name)

    def explain(self, file_path: str | Path) -> Resolution:
        return self.resolver.explain(
            str(file_path),
            self.projects,
            self.default_project_name,
            self.get_project_by_name,
        )

    def resolve(self, file_path: str | Path) -> Project | None:
        """Return the project for *file_path*, or None when the user must pick one."""
        return self.explain(file_path).project

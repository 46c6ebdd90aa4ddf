"""Pick the project that owns a source file in a multi-project workspace.

Resolution runs a fixed priority chain and stops at the first rule that
produces a project:

1. a workspace with exactly one project always uses it;
2. the only project whose root contains the file;
3. the most specific (deepest root) of several containing projects;
4. the configured default project, when nothing contains the file;
5. otherwise ``None``: the caller has to ask the user.

Nothing here touches the filesystem.  Paths are compared as strings using
the injected :class:`~ablscope.core.paths.PathStyle`, and diagnostics go to
the injected logger.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from ablscope.core.models import Project
from ablscope.core.paths import PathStyle, normalize_path

logger = logging.getLogger(__name__)

ProjectLookup = Callable[[str], Project | None]


class ResolutionRule(str, enum.Enum):
    NO_INPUT = "NO_INPUT"
    SINGLE_PROJECT = "SINGLE_PROJECT"
    AUTO_DETECTED = "AUTO_DETECTED"
    MOST_SPECIFIC = "MOST_SPECIFIC"
    DEFAULT_PROJECT = "DEFAULT_PROJECT"
    MANUAL_SELECTION = "MANUAL_SELECTION"


@dataclass(frozen=True)
class Resolution:
    """Outcome of a resolution: the chosen project (or None) and the rule that fired."""

    project: Project | None
    rule: ResolutionRule

    @property
    def needs_manual_selection(self) -> bool:
        return self.project is None


class EmptyCandidatesError(ValueError):
    """Raised when the specificity selector is handed no candidates."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot determine most specific project: candidate list is empty"
        )


def _root_length(project: Project) -> int:
    root = getattr(project, "root_dir", None)
    return len(root) if isinstance(root, str) else 0


class ProjectResolver:
    """Stateless resolver bound to a path style and a diagnostics logger."""

    def __init__(
        self,
        style: PathStyle | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.style = style or PathStyle.native()
        self.log = log or logger

    # -- containment --------------------------------------------------------

    def find_all_matching_projects(
        self, file_path: str | None, projects: Sequence[Project] | None
    ) -> list[Project]:
        """Return every project whose root contains *file_path*, in input order."""
        if not file_path or not projects:
            return []

        normalized_file = normalize_path(file_path, self.style)
        matches: list[Project] = []
        for project in projects:
            name = getattr(project, "name", "<unnamed>")
            root = getattr(project, "root_dir", None)
            if not root or not isinstance(root, str):
                self.log.warning(
                    "Project '%s' has no rootDir defined, skipping in file matching", name
                )
                continue
            if normalized_file.startswith(normalize_path(root, self.style)):
                matches.append(project)
        return matches

    # -- specificity --------------------------------------------------------

    def get_most_specific_project(self, projects: Sequence[Project]) -> Project:
        """Return the candidate with the longest root path.

        Raises :class:`EmptyCandidatesError` when *projects* is empty.  Among
        roots of equal length the earliest candidate wins (stable sort), which
        callers should treat as arbitrary.
        """
        if not projects:
            raise EmptyCandidatesError()
        if len(projects) == 1:
            return projects[0]

        ranked = sorted(projects, key=_root_length, reverse=True)
        selected = ranked[0]
        self.log.info(
            "Selected most specific project '%s' from %d matches",
            selected.name,
            len(projects),
        )
        return selected

    # -- orchestration ------------------------------------------------------

    def explain(
        self,
        file_path: str | None,
        projects: Sequence[Project] | None,
        default_project_name: str | None = None,
        get_project_by_name: ProjectLookup | None = None,
    ) -> Resolution:
        """Run the full priority chain and report which rule decided."""
        if not file_path or not projects:
            return Resolution(None, ResolutionRule.NO_INPUT)

        if len(projects) == 1:
            only = projects[0]
            self.log.info("Single project workspace: using '%s'", only.name)
            return Resolution(only, ResolutionRule.SINGLE_PROJECT)

        matched = self.find_all_matching_projects(file_path, projects)

        if len(matched) == 1:
            self.log.info(
                "Auto-detected project '%s' for file: %s", matched[0].name, file_path
            )
            return Resolution(matched[0], ResolutionRule.AUTO_DETECTED)

        if len(matched) > 1:
            most_specific = self.get_most_specific_project(matched)
            self.log.info(
                "Multiple project matches for file, selected most specific: '%s'",
                most_specific.name,
            )
            return Resolution(most_specific, ResolutionRule.MOST_SPECIFIC)

        if default_project_name and get_project_by_name:
            default = get_project_by_name(default_project_name)
            if default is not None:
                self.log.info(
                    "No project auto-detected for file, using default project: '%s'",
                    default.name,
                )
                return Resolution(default, ResolutionRule.DEFAULT_PROJECT)
            self.log.warning(
                "Default project '%s' not found in loaded projects", default_project_name
            )

        self.log.info(
            "Could not determine project for file: %s - manual selection required",
            file_path,
        )
        return Resolution(None, ResolutionRule.MANUAL_SELECTION)

    def resolve(
        self,
        file_path: str | None,
        projects: Sequence[Project] | None,
        default_project_name: str | None = None,
        get_project_by_name: ProjectLookup | None = None,
    ) -> Project | None:
        """Return the project for *file_path*, or None when the user must choose."""
        return self.explain(
            file_path, projects, default_project_name, get_project_by_name
        ).project


# ---------------------------------------------------------------------------
# Functional API
# ---------------------------------------------------------------------------


def find_all_matching_projects(
    file_path: str | None,
    projects: Sequence[Project] | None,
    *,
    style: PathStyle | None = None,
    log: logging.Logger | None = None,
) -> list[Project]:
    return ProjectResolver(style, log).find_all_matching_projects(file_path, projects)


def get_most_specific_project(
    projects: Sequence[Project],
    *,
    log: logging.Logger | None = None,
) -> Project:
    return ProjectResolver(log=log).get_most_specific_project(projects)


def resolve_project_with_fallback(
    file_path: str | None,
    projects: Sequence[Project] | None,
    default_project_name: str | None = None,
    get_project_by_name: ProjectLookup | None = None,
    *,
    style: PathStyle | None = None,
    log: logging.Logger | None = None,
) -> Project | None:
    """Resolve the project for *file_path*; None means manual selection is needed."""
    return ProjectResolver(style, log).resolve(
        file_path, projects, default_project_name, get_project_by_name
    )

from __future__ import annotations

from ablscope.resolver.project_resolver import (
    EmptyCandidatesError,
    ProjectLookup,
    ProjectResolver,
    Resolution,
    ResolutionRule,
    find_all_matching_projects,
    get_most_specific_project,
    resolve_project_with_fallback,
)

__all__ = [
    "EmptyCandidatesError",
    "ProjectLookup",
    "ProjectResolver",
    "Resolution",
    "ResolutionRule",
    "find_all_matching_projects",
    "get_most_specific_project",
    "resolve_project_with_fallback",
]

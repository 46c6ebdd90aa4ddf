from __future__ import annotations

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Project configuration (read from openedge-project.json)
# ---------------------------------------------------------------------------

class ProjectProfile(BaseModel):
    name: str
    oe_version: str | None = None
    propath: list[str] = Field(default_factory=list)
    inherits: str | None = None


class Project(BaseModel):
    name: str = Field(min_length=1)
    root_dir: str | None = None
    version: str = "1.0"
    oe_version: str | None = None
    profiles: list[ProjectProfile] = Field(default_factory=list)
    active_profile: str = "default"
    source_file: str | None = None

    def get_profile(self, name: str) -> ProjectProfile | None:
        for profile in self.profiles:
            if profile.name == name:
                return profile
        return None


# ---------------------------------------------------------------------------
# Workspace settings (read from .ablscope.yaml)
# ---------------------------------------------------------------------------

class WorkspaceSettings(BaseModel):
    default_project: str | None = None
    extra_folders: list[str] = Field(default_factory=list)

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from project_hub.app.domain.projects.enums import ProjectState


@dataclass(frozen=True)
class CreateProjectInputDTO:
    title: str
    description: str = ""
    status: str = ProjectState.DRAFT.value
    id: Optional[str] = None


@dataclass(frozen=True)
class UpdateProjectInputDTO:
    # None means "leave the field as it is"
    project_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class GetProjectInputDTO:
    project_id: str


@dataclass(frozen=True)
class DeleteProjectInputDTO:
    project_id: str


# ---------- OUTPUT DTOs ----------
@dataclass(frozen=True)
class ProjectDTO:
    id: str
    title: str
    description: str
    status: str

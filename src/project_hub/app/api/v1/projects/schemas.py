from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class CreateProjectRequest(BaseModel):
    """
    JSON request body. Only types are checked here; length and status
    rules are enforced by the domain and reported as 400.
    """
    title: str
    description: str = ""
    status: str = "draft"


class UpdateProjectRequest(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class ProjectResponse(BaseModel):
    id: str
    title: str
    description: str
    status: str

    model_config = ConfigDict(from_attributes=True)

from .entities import Project
from .enums import ProjectState
from .errors import (
    ProjectValidationError,
    ProjectNotFound,
    ProjectOperationFailed,
    FailedToCreateProject,
    FailedToUpdateProject,
    FailedToGetProject,
    FailedToListProjects,
    FailedToDeleteProject,
)
from .value_objects import ProjectId, ProjectTitle, ProjectDescription, ProjectStatus
from .repositories import ProjectRepository

__all__ = [
    "Project",
    "ProjectState",
    "ProjectId",
    "ProjectTitle",
    "ProjectDescription",
    "ProjectStatus",
    "ProjectRepository",
    "ProjectValidationError",
    "ProjectNotFound",
    "ProjectOperationFailed",
    "FailedToCreateProject",
    "FailedToUpdateProject",
    "FailedToGetProject",
    "FailedToListProjects",
    "FailedToDeleteProject",
]

# project_hub/app/application/projects/use_cases/__init__.py
from .create_project import CreateProjectUseCase
from .update_project import UpdateProjectUseCase
from .get_project import GetProjectUseCase
from .list_projects import ListProjectsUseCase
from .delete_project import DeleteProjectUseCase

__all__ = [
    "CreateProjectUseCase",
    "UpdateProjectUseCase",
    "GetProjectUseCase",
    "ListProjectsUseCase",
    "DeleteProjectUseCase",
]

from typing import Annotated

from fastapi import Depends

from project_hub.app.application.projects.use_cases import CreateProjectUseCase, UpdateProjectUseCase, \
    GetProjectUseCase, ListProjectsUseCase, DeleteProjectUseCase
from project_hub.app.core import get_project_repository
from project_hub.app.domain.projects import ProjectRepository


async def get_create_project_use_case(
        repo: Annotated[ProjectRepository, Depends(get_project_repository)],
) -> CreateProjectUseCase:
    return CreateProjectUseCase(repo)


async def get_update_project_use_case(
        repo: Annotated[ProjectRepository, Depends(get_project_repository)],
) -> UpdateProjectUseCase:
    return UpdateProjectUseCase(repo)


async def get_get_project_use_case(
        repo: Annotated[ProjectRepository, Depends(get_project_repository)],
) -> GetProjectUseCase:
    return GetProjectUseCase(repo)


async def get_list_projects_use_case(
        repo: Annotated[ProjectRepository, Depends(get_project_repository)],
) -> ListProjectsUseCase:
    return ListProjectsUseCase(repo)


async def get_delete_project_use_case(
        repo: Annotated[ProjectRepository, Depends(get_project_repository)],
) -> DeleteProjectUseCase:
    return DeleteProjectUseCase(repo)

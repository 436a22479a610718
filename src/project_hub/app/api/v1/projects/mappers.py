from project_hub.app.api.v1.projects.schemas import (
    CreateProjectRequest,
    ProjectResponse,
    UpdateProjectRequest,
)
from project_hub.app.application.projects.dto import (
    CreateProjectInputDTO,
    DeleteProjectInputDTO,
    GetProjectInputDTO,
    ProjectDTO,
    UpdateProjectInputDTO,
)


def get_create_project_input_dto(body: CreateProjectRequest) -> CreateProjectInputDTO:
    return CreateProjectInputDTO(
        title=body.title,
        description=body.description,
        status=body.status,
    )


def get_update_project_input_dto(
        project_id: str,
        body: UpdateProjectRequest,
) -> UpdateProjectInputDTO:
    return UpdateProjectInputDTO(
        project_id=project_id,
        title=body.title,
        description=body.description,
        status=body.status,
    )


def get_get_project_input_dto(project_id: str) -> GetProjectInputDTO:
    return GetProjectInputDTO(project_id=project_id)


def get_delete_project_input_dto(project_id: str) -> DeleteProjectInputDTO:
    return DeleteProjectInputDTO(project_id=project_id)


def projects_dtos_to_schema(projects_dto: list[ProjectDTO]) -> list[ProjectResponse]:
    return [ProjectResponse.model_validate(p) for p in projects_dto]

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from project_hub.app.api.v1.projects.deps import get_create_project_use_case, get_update_project_use_case, \
    get_get_project_use_case, get_list_projects_use_case, get_delete_project_use_case
from project_hub.app.api.v1.projects.mappers import get_create_project_input_dto, get_update_project_input_dto, \
    get_get_project_input_dto, get_delete_project_input_dto, projects_dtos_to_schema
from project_hub.app.api.v1.projects.schemas import CreateProjectRequest, UpdateProjectRequest, ProjectResponse
from project_hub.app.application.projects.use_cases import CreateProjectUseCase, UpdateProjectUseCase, \
    GetProjectUseCase, ListProjectsUseCase, DeleteProjectUseCase

router = APIRouter(prefix="/projects", tags=["projects"])

create_project_dep = Annotated[CreateProjectUseCase, Depends(get_create_project_use_case)]
update_project_dep = Annotated[UpdateProjectUseCase, Depends(get_update_project_use_case)]
get_project_dep = Annotated[GetProjectUseCase, Depends(get_get_project_use_case)]
get_list_projects_dep = Annotated[ListProjectsUseCase, Depends(get_list_projects_use_case)]
get_delete_project_dep = Annotated[DeleteProjectUseCase, Depends(get_delete_project_use_case)]


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
async def create_project(
        request: Request,
        use_case: create_project_dep,
        body: CreateProjectRequest,
) -> Response:
    dto = get_create_project_input_dto(body)
    project_dto = await use_case.execute(dto)
    location = str(request.url_for("get_project", project_id=project_dto.id).path)
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": location})


@router.get("", response_model=list[ProjectResponse])
async def get_projects(
        use_case: get_list_projects_dep,
):
    projects_dto = await use_case.execute()
    return projects_dtos_to_schema(projects_dto)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
        use_case: get_project_dep,
        project_id: str,
):
    request_dto = get_get_project_input_dto(project_id)
    project_dto = await use_case.execute(request_dto)
    return ProjectResponse.model_validate(project_dto)


@router.put("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_project(
        use_case: update_project_dep,
        project_id: str,
        body: UpdateProjectRequest,
) -> None:
    dto = get_update_project_input_dto(project_id, body)
    await use_case.execute(dto)
    return None


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
        use_case: get_delete_project_dep,
        project_id: str,
) -> None:
    dto = get_delete_project_input_dto(project_id)
    await use_case.execute(dto)
    return None

from __future__ import annotations

from .dto import CreateProjectInputDTO, ProjectDTO, UpdateProjectInputDTO
from project_hub.app.domain.projects import Project


def project_domain_to_output_dto(project: Project) -> ProjectDTO:
    return ProjectDTO(
        id=project.id,
        title=project.title,
        description=project.description,
        status=project.status,
    )


def project_input_dto_to_domain(data: CreateProjectInputDTO) -> Project:
    return Project.create(
        id=data.id,
        title=data.title,
        description=data.description,
        status=data.status,
    )


def apply_update_dto_to_domain(project: Project, data: UpdateProjectInputDTO) -> Project:
    """
    Apply the fields present in `data` in a fixed order (title, description,
    status). The first rejected value stops the sequence with a
    ProjectValidationError; earlier changes stay on this in-memory instance only.
    """
    if data.title is not None:
        project.update_title(data.title)
    if data.description is not None:
        project.update_description(data.description)
    if data.status is not None:
        project.update_status(data.status)
    return project

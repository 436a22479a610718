from __future__ import annotations

import logging

from project_hub.app.application.projects.dto import CreateProjectInputDTO, ProjectDTO
from project_hub.app.application.projects.mappers import (
    project_domain_to_output_dto,
    project_input_dto_to_domain,
)
from project_hub.app.domain.projects import ProjectRepository
from project_hub.app.domain.projects.errors import FailedToCreateProject, ProjectValidationError

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self, dto: CreateProjectInputDTO) -> ProjectDTO:
        try:
            project = project_input_dto_to_domain(dto)
            await self._project_repo.save(project)
        except ProjectValidationError:
            raise
        except Exception as e:
            logger.exception("Project creation failed")
            raise FailedToCreateProject(str(e)) from e

        logger.debug("Created project %s", project.id)
        return project_domain_to_output_dto(project)

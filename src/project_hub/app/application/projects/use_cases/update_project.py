from __future__ import annotations

import logging

from project_hub.app.application.projects.dto import ProjectDTO, UpdateProjectInputDTO
from project_hub.app.application.projects.mappers import (
    apply_update_dto_to_domain,
    project_domain_to_output_dto,
)
from project_hub.app.domain.projects import ProjectRepository
from project_hub.app.domain.projects.errors import (
    FailedToUpdateProject,
    ProjectNotFound,
    ProjectValidationError,
)

logger = logging.getLogger(__name__)


class UpdateProjectUseCase:
    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self, dto: UpdateProjectInputDTO) -> ProjectDTO:
        try:
            project = await self._project_repo.find_by_id(dto.project_id)
            if not project:
                raise ProjectNotFound(project_id=dto.project_id)

            project = apply_update_dto_to_domain(project, dto)
            # persisted only once every requested field has been accepted
            await self._project_repo.save(project)
        except (ProjectNotFound, ProjectValidationError):
            raise
        except Exception as e:
            logger.exception("Project update failed for %s", dto.project_id)
            raise FailedToUpdateProject(str(e)) from e

        logger.debug("Updated project %s", project.id)
        return project_domain_to_output_dto(project)

from __future__ import annotations

import logging

from project_hub.app.application.projects.dto import DeleteProjectInputDTO
from project_hub.app.domain.projects import ProjectRepository
from project_hub.app.domain.projects.errors import FailedToDeleteProject, ProjectNotFound

logger = logging.getLogger(__name__)


class DeleteProjectUseCase:
    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self, dto: DeleteProjectInputDTO) -> None:
        # existence check and delete are two separate repository calls
        try:
            project = await self._project_repo.find_by_id(dto.project_id)
            if not project:
                raise ProjectNotFound(project_id=dto.project_id)
            await self._project_repo.delete(dto.project_id)
        except ProjectNotFound:
            raise
        except Exception as e:
            logger.exception("Project deletion failed for %s", dto.project_id)
            raise FailedToDeleteProject(str(e)) from e

        logger.debug("Deleted project %s", dto.project_id)

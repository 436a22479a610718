# project_hub/app/application/projects/use_cases/list_projects.py
from __future__ import annotations

import logging
from typing import List

from project_hub.app.application.projects.dto import ProjectDTO
from project_hub.app.application.projects.mappers import project_domain_to_output_dto
from project_hub.app.domain.projects import ProjectRepository
from project_hub.app.domain.projects.errors import FailedToListProjects

logger = logging.getLogger(__name__)


class ListProjectsUseCase:
    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self) -> List[ProjectDTO]:
        try:
            projects = await self._project_repo.find_all()
        except Exception as e:
            logger.exception("Listing projects failed")
            raise FailedToListProjects(str(e)) from e
        return [project_domain_to_output_dto(p) for p in projects]

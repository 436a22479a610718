import logging

from project_hub.app.application.projects.dto import GetProjectInputDTO, ProjectDTO
from project_hub.app.application.projects.mappers import project_domain_to_output_dto
from project_hub.app.domain.projects import ProjectRepository
from project_hub.app.domain.projects.errors import FailedToGetProject, ProjectNotFound

logger = logging.getLogger(__name__)


class GetProjectUseCase:
    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def execute(self, dto: GetProjectInputDTO) -> ProjectDTO:
        try:
            project = await self._project_repo.find_by_id(dto.project_id)
        except Exception as e:
            logger.exception("Project lookup failed for %s", dto.project_id)
            raise FailedToGetProject(str(e)) from e
        if not project:
            raise ProjectNotFound(project_id=dto.project_id)
        return project_domain_to_output_dto(project)

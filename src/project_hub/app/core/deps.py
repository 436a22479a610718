from functools import lru_cache

from project_hub.app.domain.projects import ProjectRepository
from project_hub.app.infrastructure.projects.repositories import InMemoryProjectRepository


@lru_cache
def get_project_repository() -> ProjectRepository:
    """
    Singleton project store for the process.
    Swap the implementation here without touching the use cases.
    """
    return InMemoryProjectRepository()

import pytest

from project_hub.app.infrastructure.projects.repositories import InMemoryProjectRepository
from tests.unit.fakes.project_repo import FakeProjectRepository


@pytest.fixture
def project_repo() -> FakeProjectRepository:
    return FakeProjectRepository()


@pytest.fixture
def in_memory_repo() -> InMemoryProjectRepository:
    return InMemoryProjectRepository()

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from project_hub.app.domain.projects.entities import Project


def _clone(project: Project) -> Project:
    return Project.create(project.id, project.title, project.description, project.status)


class FakeProjectRepository:
    """
    In-memory fake for ProjectRepository.

    Design goals:
    - deterministic
    - no shared instances between caller and storage
    - records every command so tests can assert on calls
    """

    def __init__(self) -> None:
        # canonical storage by id, dict keeps insertion order
        self._projects: dict[str, Project] = {}
        self.saved: list[str] = []
        self.deleted: list[str] = []

    # ---------- Commands ----------

    async def save(self, project: Project) -> None:
        self._projects[project.id] = _clone(project)
        self.saved.append(project.id)

    async def delete(self, project_id: str) -> None:
        self._projects.pop(project_id, None)
        self.deleted.append(project_id)

    # ---------- Queries ----------

    async def find_by_id(self, project_id: str) -> Optional[Project]:
        project = self._projects.get(project_id)
        return _clone(project) if project else None

    async def find_all(self) -> Sequence[Project]:
        return [_clone(p) for p in self._projects.values()]

    # ---------- Test helpers ----------

    def _add_raw(self, project: Project) -> None:
        """
        Insert without recording a save.
        Useful for setting up fixtures quickly.
        """
        self._projects[project.id] = _clone(project)

    def _all(self) -> list[Project]:
        return list(self._projects.values())


class FailingProjectRepository(FakeProjectRepository):
    """Raises `error` from every method named in `failing`."""

    def __init__(self, *failing: str, error: Exception | None = None) -> None:
        super().__init__()
        self._failing = set(failing)
        self._error = error or RuntimeError("storage offline")

    def _maybe_fail(self, name: str) -> None:
        if name in self._failing:
            raise self._error

    async def save(self, project: Project) -> None:
        self._maybe_fail("save")
        await super().save(project)

    async def delete(self, project_id: str) -> None:
        self._maybe_fail("delete")
        await super().delete(project_id)

    async def find_by_id(self, project_id: str) -> Optional[Project]:
        self._maybe_fail("find_by_id")
        return await super().find_by_id(project_id)

    async def find_all(self) -> Sequence[Project]:
        self._maybe_fail("find_all")
        return await super().find_all()

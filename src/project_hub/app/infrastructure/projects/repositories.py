from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from project_hub.app.domain.common import utcnow
from project_hub.app.domain.projects import Project
from project_hub.app.infrastructure.projects.mappers import (
    project_domain_to_record,
    project_record_to_domain,
)
from project_hub.app.infrastructure.projects.models import ProjectRecord


class InMemoryProjectRepository:
    """
    List-backed ProjectRepository.

    Holds plain ProjectRecords in insertion order and rebuilds a fresh
    Project on every read, so callers never share state with the store.
    No method awaits, which keeps each call atomic on the event loop.
    """

    def __init__(self) -> None:
        self._records: list[ProjectRecord] = []

    # ---------- Queries ----------

    async def find_all(self) -> Sequence[Project]:
        return [project_record_to_domain(r) for r in self._records]

    async def find_by_id(self, project_id: str) -> Optional[Project]:
        index = self._index_of(project_id)
        if index is None:
            return None
        return project_record_to_domain(self._records[index])

    # ---------- Commands ----------

    async def save(self, project: Project) -> None:
        now = utcnow()
        index = self._index_of(project.id)
        if index is None:
            self._records.append(
                project_domain_to_record(project, created_at=now, updated_at=now)
            )
            return

        # keep the original created_at, only updated_at moves
        created_at = self._records[index].created_at
        self._records[index] = project_domain_to_record(
            project, created_at=created_at, updated_at=now
        )

    async def delete(self, project_id: str) -> None:
        self._records = [r for r in self._records if r.id != project_id]

    # ---------- Helpers ----------

    def _index_of(self, project_id: str) -> Optional[int]:
        for i, record in enumerate(self._records):
            if record.id == project_id:
                return i
        return None

    def records(self) -> list[ProjectRecord]:
        """Snapshot of the stored records, timestamps included."""
        return [replace(r) for r in self._records]

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .entities import Project


class ProjectRepository(Protocol):
    async def find_all(self) -> Sequence[Project]:
        ...

    async def find_by_id(self, project_id: str) -> Optional[Project]:
        ...

    async def save(self, project: Project) -> None:
        """
        Upsert keyed by `project.id`: replace the stored entry in place
        when the id is known, append otherwise.
        """
        ...

    async def delete(self, project_id: str) -> None:
        """Remove the entry for `project_id`; unknown ids are ignored."""
        ...

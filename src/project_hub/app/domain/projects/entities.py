# project_hub/app/domain/projects/entities.py
from __future__ import annotations

from .value_objects import ProjectDescription, ProjectId, ProjectStatus, ProjectTitle


class Project:
    """
    Aggregate root for a project.

    Value objects are kept private and only raw strings are exposed.
    Build instances with `Project.create`; every mutator validates the new
    value before swapping it in, so a rejected update leaves the entity as it was.
    """

    __slots__ = ("_id", "_title", "_description", "_status")

    def __init__(
            self,
            *,
            id: ProjectId,
            title: ProjectTitle,
            description: ProjectDescription,
            status: ProjectStatus,
    ) -> None:
        self._id = id
        self._title = title
        self._description = description
        self._status = status

    @classmethod
    def create(cls, id: str | None, title: str, description: str, status: str) -> Project:
        return cls(
            id=ProjectId.generate(id),
            title=ProjectTitle.create(title),
            description=ProjectDescription.create(description),
            status=ProjectStatus.create(status),
        )

    def update_title(self, new_title: str) -> None:
        self._title = ProjectTitle.create(new_title)

    def update_description(self, new_description: str) -> None:
        self._description = ProjectDescription.create(new_description)

    def update_status(self, new_status: str) -> None:
        self._status = ProjectStatus.create(new_status)

    @property
    def id(self) -> str:
        return self._id.value

    @property
    def title(self) -> str:
        return self._title.value

    @property
    def description(self) -> str:
        return self._description.value

    @property
    def status(self) -> str:
        return self._status.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return (
            self._id == other._id
            and self._title == other._title
            and self._description == other._description
            and self._status == other._status
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Project(id={self.id!r}, title={self.title!r}, "
            f"description={self.description!r}, status={self.status!r})"
        )

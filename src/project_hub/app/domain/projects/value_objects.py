# project_hub/app/domain/projects/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import ProjectState
from .errors import ProjectValidationError
from ..common import new_id

TITLE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 250


@dataclass(frozen=True, slots=True)
class ProjectId:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ProjectValidationError("Project id cannot be empty.")

    @classmethod
    def generate(cls, value: Optional[str] = None) -> "ProjectId":
        """
        Wrap `value` as-is, or mint a fresh UUID4 string when it is
        None or empty. Supplied ids are not format-checked.
        """
        return cls(value or new_id())

    def equals(self, other: str) -> bool:
        return self.value == other

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ProjectTitle:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not 0 < len(self.value) <= TITLE_MAX_LENGTH:
            raise ProjectValidationError(
                f"Title must be between 1 and {TITLE_MAX_LENGTH} characters."
            )

    @classmethod
    def create(cls, value: str) -> "ProjectTitle":
        return cls(value)

    def equals(self, other: str) -> bool:
        return self.value == other

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ProjectDescription:
    value: str

    def __post_init__(self) -> None:
        # empty descriptions are allowed
        if not isinstance(self.value, str) or len(self.value) > DESCRIPTION_MAX_LENGTH:
            raise ProjectValidationError(
                f"Description must be up to {DESCRIPTION_MAX_LENGTH} characters."
            )

    @classmethod
    def create(cls, value: str) -> "ProjectDescription":
        return cls(value)

    def equals(self, other: str) -> bool:
        return self.value == other

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ProjectStatus:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ProjectValidationError("Invalid project status")
        # exact, case-sensitive match; no transition rules between states
        value = str(self.value)
        if value not in ProjectState.values():
            raise ProjectValidationError("Invalid project status")
        object.__setattr__(self, "value", value)

    @classmethod
    def create(cls, value: str) -> "ProjectStatus":
        return cls(value)

    @classmethod
    def draft(cls) -> "ProjectStatus":
        return cls(ProjectState.DRAFT.value)

    @classmethod
    def active(cls) -> "ProjectStatus":
        return cls(ProjectState.ACTIVE.value)

    @classmethod
    def completed(cls) -> "ProjectStatus":
        return cls(ProjectState.COMPLETED.value)

    @classmethod
    def archived(cls) -> "ProjectStatus":
        return cls(ProjectState.ARCHIVED.value)

    def equals(self, other: str) -> bool:
        return self.value == other

    def __str__(self) -> str:
        return self.value

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class ProjectRecord:
    """Stored shape of a project; timestamps never reach the domain."""

    id: str
    title: str
    status: str
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None

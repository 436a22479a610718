from datetime import datetime

from project_hub.app.domain.projects import Project
from project_hub.app.infrastructure.projects.models import ProjectRecord


def project_record_to_domain(r: ProjectRecord) -> Project:
    return Project.create(
        id=r.id,
        title=r.title,
        description=r.description or "",
        status=r.status,
    )


def project_domain_to_record(
        p: Project,
        *,
        created_at: datetime,
        updated_at: datetime,
) -> ProjectRecord:
    return ProjectRecord(
        id=p.id,
        title=p.title,
        description=p.description,
        status=p.status,
        created_at=created_at,
        updated_at=updated_at,
    )

from project_hub.app.core.config import settings
from project_hub.app.core.deps import get_project_repository
from project_hub.app.core.logging import setup_logging

__all__ = ['settings',
           'get_project_repository',
           'setup_logging']

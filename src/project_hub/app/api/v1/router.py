# project_hub/app/api/v1/router.py
from fastapi import APIRouter

from project_hub.app.api.v1.projects import router as project_router

api_router = APIRouter()
api_router.include_router(project_router.router)

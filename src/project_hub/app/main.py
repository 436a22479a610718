from contextlib import asynccontextmanager
from fastapi import FastAPI

from project_hub.app.api.v1.router import api_router
from project_hub.app.core import settings, setup_logging
from project_hub.app.exception_handlers import register_exception_handlers


def create_app():
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
        yield

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.include_router(api_router, prefix=settings.API_PREFIX)
    @app.get("/health")
    def health():
        return {"status": "ok"}

    register_exception_handlers(app)
    return app

app = create_app()

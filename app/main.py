from __future__ import annotations

from fastapi import FastAPI

from app.api_routes import router as api_router
from app.core.errors import register_error_handlers
from app.core.logging_config import setup_logging
from app.routes.deps import settings


def create_app() -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_title)
    register_error_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()

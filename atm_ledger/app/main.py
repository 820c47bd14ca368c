import logging
from typing import Optional

from fastapi import FastAPI

from .api.exceptions import register_exception_handlers
from .api.routes import router as accounts_router
from .core.config import Settings, get_settings


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    application = FastAPI(title=settings.app_name)
    application.include_router(accounts_router)
    register_exception_handlers(application)

    @application.get("/health")
    def read_health() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()

"""Pager demo API — FastAPI application factory."""


import logging
import sys

import uvicorn
from fastapi import FastAPI

from pager.core.config import AppSettings, PagerSettings, settings
from pager.core.exceptions import register_exception_handlers
from pager.plugin import register_pager
from pager.routers.users import router as users_router
from pager.schemas.common import HealthResponse


def _configure_logging(app_settings: AppSettings) -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if app_settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )


def create_app(
    app_settings: AppSettings | None = None,
    pager_settings: PagerSettings | None = None,
) -> FastAPI:
    app_settings = app_settings or settings
    _configure_logging(app_settings)

    app = FastAPI(
        title=app_settings.app_name,
        version="1.0.0",
        docs_url="/docs" if app_settings.app_env == "development" else None,
        redoc_url="/redoc" if app_settings.app_env == "development" else None,
    )

    # --- Pager + global exception handlers ---
    register_pager(app, pager_settings)
    register_exception_handlers(app)

    # --- Routes ---
    app.include_router(users_router)

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=app_settings.app_name, env=app_settings.app_env)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("pager.main:app", host="0.0.0.0", port=settings.app_port)

from __future__ import annotations

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from culinarycompanion.shared.config.settings import settings
from culinarycompanion.shared.logging.logger import setup_logging
from culinarycompanion.shared.persistence.mongo import ensure_indexes

from culinarycompanion.shared.api.health import router as health_router
from culinarycompanion.features.recipes.api.routes import router as recipes_router

log = logging.getLogger("app")


def _split_setting(value: str) -> list:
    if value and value != "*":
        return [v.strip() for v in value.split(",") if v.strip()]
    return ["*"]


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title="Culinary Companion", version="1.0.0")

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_split_setting(settings.CORS_ALLOW_ORIGINS),
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=_split_setting(settings.CORS_ALLOW_METHODS),
        allow_headers=_split_setting(settings.CORS_ALLOW_HEADERS),
    )

    app.add_exception_handler(RequestValidationError, _validation_error_handler)

    # Routers
    app.include_router(health_router,  prefix="/api")
    app.include_router(recipes_router, prefix="/api")

    @app.on_event("startup")
    async def _on_startup():
        try:
            ensure_indexes()
        except Exception as e:
            log.warning("ensure_indexes failed: %s", e)

    return app

# Uvicorn/Gunicorn entry point
app = create_app()

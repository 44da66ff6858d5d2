# backend/app.py
from __future__ import annotations
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.brand_watch.config import Settings
from src.brand_watch.exceptions import ValidationError
from src.brand_watch.models.base import BaseLLMClient

from backend.routes import brand
from backend.schema import ErrorEnvelope
from backend.services.check_service import build_check_service

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorEnvelope(error=message).model_dump())


def create_app(settings: Optional[Settings] = None, client: Optional[BaseLLMClient] = None) -> FastAPI:
    cfg = settings or Settings.from_env()
    logging.basicConfig(
        level=cfg.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Brand Watch API")
    app.state.settings = cfg

    # CORS pour le front en dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # /check-brand et /api/check-brand (chemin utilisé par le front)
    app.include_router(brand.router)
    app.include_router(brand.router, prefix="/api")

    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError):
        return _error(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error(request: Request, exc: RequestValidationError):
        logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
        return _error(400, "Both prompt and brandName are required and must be strings")

    @app.on_event("startup")
    def _startup():
        # ConfigError ici = arrêt du démarrage, on ne sert pas sans clé valide
        cfg.require_api_key()
        app.state.check_service = build_check_service(cfg, client)
        logger.info("Primary model: %s", cfg.primary_model)
        logger.info("Model options: %s", ", ".join(cfg.model_candidates))
        logger.info("Temperature: %s", cfg.TEMPERATURE)

    return app


app = create_app()

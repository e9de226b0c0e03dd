"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pressurepath.config import settings
from pressurepath.engine.errors import PressurePathError
from pressurepath.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pressurepath_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _domain_error(request: Request, exc: PressurePathError) -> JSONResponse:
    logger.info("%s %s rejected: %s (%s)", request.method, request.url.path, exc, exc.code)
    return JSONResponse(status_code=422, content=ErrorResponse(detail=str(exc), code=exc.code).model_dump())


def create_app() -> FastAPI:
    app = FastAPI(
        title="pressurepath",
        description="Variable-width (pressure) outlines for vector paths",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PressurePathError, _domain_error)

    from pressurepath.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()

"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from epicycles import __version__
from epicycles.config import settings
from epicycles.engine.errors import EpicycleError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.epicycles_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Fourier Epicycles",
        description="Approximate SVG outlines with a chain of rotating vectors",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(EpicycleError)
    async def _epicycle_error(request: Request, exc: EpicycleError) -> JSONResponse:
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "error": type(exc).__name__},
        )

    from epicycles.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()

"""Backend greeting service API."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.config import Settings
from backend.api.routes_root import router as root_router

# Configure logging
logging.basicConfig(
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Render unmatched paths and methods as a plain 404."""
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


def create_app(config: Settings) -> FastAPI:
    """Build the application around an already-loaded configuration."""
    logging.getLogger().setLevel(config.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Backend starting up...")
        yield
        logger.info("Backend shutting down...")

    app = FastAPI(
        title="Backend",
        description="Static greeting service.",
        version="1.0.0",
        lifespan=lifespan,
        # Only GET / is served; keep the generated docs off the wire
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = config

    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    # Mount routers
    app.include_router(root_router)

    return app

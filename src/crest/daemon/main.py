"""Crest daemon — FastAPI app serving step metrics and pipeline badges."""

import logging
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from crest import __version__
from crest.core.config import get_settings
from crest.core.database import init_engine, create_tables
from crest.core.errors import CrestError
from crest.api.router import api_router

logger = logging.getLogger("crest")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown."""
    settings = get_settings()

    init_engine(settings.database_url)
    await create_tables()
    logger.info(f"Database initialized: {settings.database_url}")

    yield

    logger.info("Crest daemon stopped")


async def crest_error_handler(request: Request, exc: CrestError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Crest",
        description="CI status reporting — step metrics and pipeline badges",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(api_router)
    app.add_exception_handler(CrestError, crest_error_handler)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": __version__}

    return app


def main():
    """Entry point for `crestd` command."""
    import sys

    settings = get_settings()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    host = settings.host
    port = settings.port

    args = sys.argv[1:]
    for i, arg in enumerate(args):
        if arg == "--port" and i + 1 < len(args):
            port = int(args[i + 1])
        if arg == "--host" and i + 1 < len(args):
            host = args[i + 1]

    logger.info(f"Starting Crest daemon v{__version__} on {host}:{port}")
    logger.info(f"Badge template: {settings.badge_template}")

    app = create_app()
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level)


if __name__ == "__main__":
    main()

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError

from remarkbook.api.middleware.error_handler import (
    handle_generic_error,
    handle_integrity_error,
    handle_remarkbook_error,
    handle_validation_error,
)
from remarkbook.api.middleware.logging import RequestLoggingMiddleware
from remarkbook.api.routes import router as api_router
from remarkbook.api.routes.health import router as health_router
from remarkbook.config import settings
from remarkbook.core.exceptions import RemarkbookError
from remarkbook.core.logging_config import setup_logging
from remarkbook.db.session import async_engine
from remarkbook.services.uploads import UPLOADS_URL_PREFIX

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging(settings.log_level, settings.log_json)
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    logger.info("Remarkbook API started", extra={"path": settings.upload_dir})
    yield
    # Shutdown
    await async_engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Remarkbook API",
        description="Personal remarks with payments, priorities and profiles",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(RemarkbookError, handle_remarkbook_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_generic_error)

    # Uploaded profile images; the directory is created at startup.
    app.mount(
        UPLOADS_URL_PREFIX,
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    app.include_router(health_router)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "remarkbook.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env.lower() == "development",
    )

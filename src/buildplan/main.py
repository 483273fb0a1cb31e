"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from buildplan.config import ServerConfig
from buildplan.context import ServerContext
from buildplan.errors import RegistrationError, ResolveError
from buildplan.routes.entries import router as entries_router
from buildplan.routes.slugs import router as slugs_router
from buildplan.services.registry_service import RegistryService
from buildplan.services.resolver import SummaryService

logger = logging.getLogger(__name__)


def install_context(app: FastAPI, context: ServerContext) -> None:
    """Attach the context and the services built on it to app state."""
    app.state.context = context
    app.state.registry_service = RegistryService(context)
    app.state.summary_service = SummaryService(context)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup.

    Creates the production context with an empty in-memory registry. The
    registry lives as long as the process; nothing needs tearing down.
    """
    install_context(app, ServerContext.create())
    logger.info("Entry registry initialized")
    yield


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


async def registration_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate RegistrationError into a 400 response."""
    assert isinstance(exc, RegistrationError)
    return _failure(400, exc.message)


async def resolve_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate ResolveError into a 400 response."""
    assert isinstance(exc, ResolveError)
    return _failure(400, exc.message)


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report unparseable requests (e.g. invalid JSON) as 400 instead of 422."""
    assert isinstance(exc, RequestValidationError)
    reasons = "; ".join(error["msg"] for error in exc.errors())
    return _failure(400, f"malformed request: {reasons}")


def create_app(context: ServerContext | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        context: Optional ServerContext for testing. If None, uses lifespan
                 to create production context.

    Returns:
        Configured FastAPI application
    """
    if context is not None:
        # Test mode: use provided context, no lifespan
        app = FastAPI(
            title="Buildplan",
            description="Registry of resources and projects with build summaries",
            version="0.1.0",
        )
        install_context(app, context)
    else:
        app = FastAPI(
            title="Buildplan",
            description="Registry of resources and projects with build summaries",
            version="0.1.0",
            lifespan=lifespan,
        )

    app.add_exception_handler(RegistrationError, registration_error_handler)
    app.add_exception_handler(ResolveError, resolve_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(slugs_router)
    app.include_router(entries_router)

    return app


def run(config: ServerConfig | None = None) -> None:
    """Run the server."""
    if config is None:
        config = ServerConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server running on http://%s:%s", config.host, config.port)
    uvicorn.run(
        create_app(),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    run()

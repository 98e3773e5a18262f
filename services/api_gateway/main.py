"""
API Gateway Main Application

FastAPI application serving versioned routes through header and URL version negotiation.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api_versioning import VersioningException, VersionRegistry, default_registry, with_versioning
from api_versioning.config import Settings, settings
from api_versioning.logging_config import configure_logging
from services.api_gateway.middleware import LoggingMiddleware
from services.api_gateway.routers import status

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Reports the configured version range on startup.
    """
    supported = app.state.version_registry.get_supported_versions()
    logger.info(
        "Starting API Gateway",
        version=app.version,
        last_supported_version=supported.from_version,
        latest_version=supported.to_version,
    )
    yield
    logger.info("Shutting down API Gateway")


def create_app(config: Settings = settings, registry: VersionRegistry | None = None) -> FastAPI:
    """
    Build the gateway application.

    Args:
        config: Settings to configure versioning from
        registry: Version registry to configure (default: process-wide)

    Returns:
        FastAPI: Configured application
    """
    app = FastAPI(
        title="API Gateway",
        description="Versioned API with header and URL version negotiation",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.version_registry = registry or default_registry
    app.add_middleware(LoggingMiddleware)

    with_versioning(
        app=app,
        routes=[{"status": status.router}],
        base=config.api_base_path,
        header=config.api_version_header,
        url=config.api_version_url_param,
        last_supported_version=config.api_last_supported_version,
        latest_version=config.api_latest_version,
        registry=app.state.version_registry,
    )

    @app.exception_handler(VersioningException)
    async def versioning_exception_handler(request: Request, exc: VersioningException) -> JSONResponse:
        """
        Handle versioning exceptions with structured error responses.

        Args:
            request: FastAPI request
            exc: Versioning exception

        Returns:
            JSONResponse: Structured error response
        """
        logger.warning(
            "Versioning exception",
            path=request.url.path,
            method=request.method,
            error_code=exc.error_code.value,
            message=exc.message,
            status_code=exc.status_code,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    return app


configure_logging(settings.log_level, settings.log_format)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "services.api_gateway.main:app",
        host=settings.api_gateway_host,
        port=settings.api_gateway_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )

"""
Versioned route registration.

Mounts each route twice: once under ``{base}/{name}`` behind the header
resolver and once under ``{base}/{<url param>}/{name}`` behind the URL resolver.
A request therefore passes through exactly one resolver.
"""

from typing import Any

import structlog
from fastapi import Depends
from pydantic import BaseModel, ConfigDict

from api_versioning.exceptions import InvalidArgumentError
from api_versioning.middleware import (
    HeaderVersionResolver,
    UrlVersionResolver,
    install_exception_handlers,
)
from api_versioning.versions import VersionRegistry, default_registry

logger = structlog.get_logger(__name__)


class VersioningConfig(BaseModel):
    """Route registration settings."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    app: Any = None
    routes: list[dict[str, Any]] | None = None
    base: str | None = None
    header: str | None = None
    url: str | None = None
    last_supported_version: str | None = None
    latest_version: str | None = None
    registry: VersionRegistry | None = None


REQUIRED_OBJECTS = ("routes", "app")
REQUIRED_STRINGS = ("base", "last_supported_version", "latest_version")


def with_versioning(config: VersioningConfig | dict[str, Any] | None = None, **kwargs: Any) -> list[str]:
    """
    Configure the supported range and register every route with versioning.

    Args:
        config: Registration settings (or pass them as keyword arguments)

    Returns:
        Registered path prefixes, in registration order

    Raises:
        InvalidArgumentError: If a required setting is missing
    """
    if config is None and not kwargs:
        raise InvalidArgumentError("with_versioning", "config")
    if isinstance(config, VersioningConfig):
        config = config.model_copy(update=kwargs)
    else:
        config = VersioningConfig(**{**(config or {}), **kwargs})

    for field in REQUIRED_OBJECTS:
        if getattr(config, field) is None:
            raise InvalidArgumentError("with_versioning", field)
    for field in REQUIRED_STRINGS:
        if not getattr(config, field):
            raise InvalidArgumentError("with_versioning", field)

    registry = config.registry or default_registry
    registry.set_supported_versions(config.last_supported_version, config.latest_version)

    app = config.app
    prefixes: list[str] = []

    for route in config.routes:
        if not route:
            raise InvalidArgumentError("with_versioning", "routes")
        name, router = next(iter(route.items()))

        if config.header:
            prefix = f"{config.base}/{name}"
            app.include_router(
                router,
                prefix=prefix,
                dependencies=[Depends(HeaderVersionResolver(config.header, registry))],
            )
            prefixes.append(prefix)

        if config.url:
            prefix = f"{config.base}/{{{config.url}}}/{name}"
            app.include_router(
                router,
                prefix=prefix,
                dependencies=[Depends(UrlVersionResolver(config.url, registry))],
            )
            prefixes.append(prefix)

    if hasattr(app, "add_exception_handler"):
        install_exception_handlers(app)

    logger.info(
        "Versioned routes registered",
        base=config.base,
        header=config.header,
        url=config.url,
        prefixes=prefixes,
    )
    return prefixes

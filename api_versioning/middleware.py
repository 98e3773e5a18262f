"""
API Version Resolution

Per-request resolution of the requested API version, read from a header or a
URL path parameter. Resolvers are FastAPI dependencies: they write the resolved
version to ``request.state.api_version`` or reject the request with HTTP 400.
Missing versions fall back to the latest supported version.
"""

from typing import Any

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

from api_versioning.exceptions import InvalidArgumentError, UnsupportedVersionError
from api_versioning.versions import VersionRegistry, default_registry, is_version_active

logger = structlog.get_logger(__name__)

STATE_ATTRIBUTE = "api_version"


class VersionResolver:
    """
    Base class for version resolution.

    Subclasses only decide where the candidate token comes from.
    """

    source = "unknown"

    def __init__(self, name: str, registry: VersionRegistry | None = None):
        """
        Initialize resolver.

        Args:
            name: Header or path parameter name carrying the version
            registry: Supported range to validate against (default: process-wide)
        """
        if not name:
            raise InvalidArgumentError(type(self).__name__, "name")
        self.name = name
        self.registry = registry or default_registry

    def extract(self, request: Request) -> str | None:
        """Return the candidate token, or ``None`` when none was given."""
        raise NotImplementedError

    def resolve(self, version: str | None) -> str | None:
        """
        Apply the resolution rules to a candidate token.

        Returns:
            The latest version when no token is given, the token itself when it
            is active, or ``None`` when the token must be rejected
        """
        if not version:
            return self.registry.latest
        if not is_version_active(version, self.registry):
            return None
        return version

    async def __call__(self, request: Request) -> str | None:
        """
        Resolve the version of ``request`` and record it on the request state.

        Raises:
            UnsupportedVersionError: If the requested version is not supported
        """
        requested = self.extract(request)
        if requested is None:
            resolved = self.registry.latest
        else:
            resolved = self.resolve(requested)
            if resolved is None:
                raise UnsupportedVersionError(requested, context={"source": self.source})

        setattr(request.state, STATE_ATTRIBUTE, resolved)
        logger.debug(
            "API version resolved",
            source=self.source,
            requested=requested,
            resolved=resolved,
            path=request.url.path,
        )
        return resolved


class HeaderVersionResolver(VersionResolver):
    """Reads the version from a request header (case-insensitive)."""

    source = "header"

    def extract(self, request: Request) -> str | None:
        return request.headers.get(self.name) or None


class UrlVersionResolver(VersionResolver):
    """Reads the version from a URL path parameter."""

    source = "url"

    def extract(self, request: Request) -> str | None:
        return request.path_params.get(self.name) or None


def header_middleware(name: str, registry: VersionRegistry | None = None) -> HeaderVersionResolver:
    """Create a header-sourced resolver dependency."""
    return HeaderVersionResolver(name, registry)


def url_middleware(name: str, registry: VersionRegistry | None = None) -> UrlVersionResolver:
    """Create a URL-sourced resolver dependency."""
    return UrlVersionResolver(name, registry)


def get_api_version(request: Any) -> str | None:
    """Read the resolved version from a request, if any."""
    state = getattr(request, "state", None)
    return getattr(state, STATE_ATTRIBUTE, None)


async def version_rejection_handler(request: Request, exc: UnsupportedVersionError) -> JSONResponse:
    """
    Render a rejected version.

    Args:
        request: FastAPI request
        exc: Rejection raised by a resolver

    Returns:
        JSONResponse: 400 with ``{"message": ...}``
    """
    logger.warning(
        "Unsupported API version requested",
        path=request.url.path,
        method=request.method,
        version=exc.version,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def install_exception_handlers(app: Any) -> None:
    """Register the rejection handler on an application."""
    app.add_exception_handler(UnsupportedVersionError, version_rejection_handler)

"""
Pytest configuration and fixtures for api_versioning tests.

Provides common fixtures for testing:
- Isolated version registries
- Starlette requests carrying version headers or path parameters
- An ASGI client for the gateway application
"""

from collections.abc import AsyncGenerator, Callable, Generator

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.requests import Request

from api_versioning import VersionRegistry, default_registry


# ============ Registry Fixtures ============


@pytest.fixture(autouse=True)
def reset_default_registry() -> Generator[None, None, None]:
    """Leave the process-wide registry unconfigured between tests."""
    default_registry.reset()
    yield
    default_registry.reset()


@pytest.fixture
def registry() -> VersionRegistry:
    """Registry serving v1 through v5."""
    registry = VersionRegistry()
    registry.set_supported_versions("v1", "v5")
    return registry


# ============ Request Fixtures ============


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Factory for bare Starlette requests."""

    def _make_request(
        headers: dict[str, str] | None = None,
        path_params: dict[str, str] | None = None,
        path: str = "/api/test/",
    ) -> Request:
        scope = {
            "type": "http",
            "method": "GET",
            "path": path,
            "query_string": b"",
            "headers": [
                (key.lower().encode(), value.encode())
                for key, value in (headers or {}).items()
            ],
            "path_params": path_params or {},
        }
        return Request(scope)

    return _make_request


# ============ Client Fixtures ============


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Client for the gateway app serving v1 through v3."""
    from api_versioning.config import Settings
    from services.api_gateway.main import create_app

    config = Settings(api_last_supported_version="v1", api_latest_version="v3")
    app = create_app(config, registry=VersionRegistry())

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

"""
Service status endpoint with per-version payloads.

v1 clients get a bare status string, v2 adds the served version; later
versions get the current payload.
"""

from fastapi import APIRouter, Request

from api_versioning import controller_with_versioning, get_api_version


class StatusController:
    """Latest status behavior."""

    async def get_status(self, request: Request) -> dict:
        return {
            "status": "ok",
            "api_version": get_api_version(request),
            "links": {"self": request.url.path},
        }

    async def get_ping(self, request: Request) -> dict:
        return {"ping": "pong"}


class StatusControllerV2:
    async def get_status(self, request: Request) -> dict:
        return {"status": "ok", "api_version": get_api_version(request)}


class StatusControllerV1:
    async def get_status(self, request: Request) -> str:
        return "ok"


controller = controller_with_versioning(
    StatusController(),
    {
        "v1": StatusControllerV1(),
        "v2": StatusControllerV2(),
    },
)

router = APIRouter()
router.add_api_route("/", controller.get_status, methods=["GET"], response_model=None)
router.add_api_route("/ping", controller.get_ping, methods=["GET"], response_model=None)

"""
Versioned Controllers

Wraps a "latest" controller and a mapping of older implementations so each
operation call is routed by the version resolved for the request.

Older implementations may override only some operations; missing ones are
inherited from the next-newer version, and the newest mapped version inherits
from the latest controller.
"""

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from api_versioning.exceptions import InvalidArgumentError
from api_versioning.middleware import get_api_version
from api_versioning.versions import version_sort_key

logger = structlog.get_logger(__name__)


def get_operation(spec: Any, name: str) -> Callable | None:
    """Look up an operation on an object or a mapping of callables."""
    if isinstance(spec, Mapping):
        operation = spec.get(name)
    else:
        operation = getattr(spec, name, None)
    return operation if callable(operation) else None


def operation_names(spec: Any) -> list[str]:
    """Public callable operations of a controller."""
    names = spec.keys() if isinstance(spec, Mapping) else dir(spec)
    return [
        name
        for name in names
        if not name.startswith("_") and get_operation(spec, name) is not None
    ]


@dataclass
class ChainNode:
    """One version implementation and the node it falls back to."""

    version: str | None
    implementation: Any
    fallback: "ChainNode | None" = None

    def lookup(self, name: str) -> Callable | None:
        """Find ``name`` on this node or the first newer node that has it."""
        node: ChainNode | None = self
        while node is not None:
            operation = get_operation(node.implementation, name)
            if operation is not None:
                return operation
            node = node.fallback
        return None


def build_version_chain(controller: Any, versions: Mapping[str, Any] | None) -> dict[str, ChainNode]:
    """
    Link version implementations oldest to newest, ending at the latest controller.

    Args:
        controller: Latest controller
        versions: Mapping of version token to implementation

    Returns:
        Mapping of version token to its chain node

    Raises:
        InvalidArgumentError: If either argument is missing
    """
    if controller is None or versions is None:
        raise InvalidArgumentError("build_version_chain")

    node = ChainNode(version=None, implementation=controller)
    chain: dict[str, ChainNode] = {}
    for version in sorted(versions, key=version_sort_key, reverse=True):
        node = ChainNode(version=version, implementation=versions[version], fallback=node)
        chain[version] = node
    return chain


def find_api_version(args: tuple, kwargs: dict) -> str | None:
    """Resolved version carried by the ``request`` argument of a call."""
    candidates = [kwargs["request"]] if "request" in kwargs else []
    candidates.extend(args)
    for candidate in candidates:
        version = get_api_version(candidate)
        if version:
            return version
    return None


class VersionedController:
    """
    Controller whose operations dispatch on the resolved API version.

    Exposes the operations of the latest controller. A call whose request
    carries a mapped version runs that version's implementation; any other
    call, including unknown versions, runs the latest one.
    """

    def __init__(self, controller: Any, versions: Mapping[str, Any]):
        """
        Initialize versioned controller.

        Args:
            controller: Latest controller
            versions: Mapping of version token to older implementation
        """
        self._controller = controller
        self._versions = dict(versions)
        self._chain = build_version_chain(controller, self._versions)
        self._operations = {
            name: self._make_operation(name) for name in operation_names(controller)
        }

    def __getattr__(self, name: str) -> Callable:
        operations = self.__dict__.get("_operations", {})
        if name in operations:
            return operations[name]
        raise AttributeError(f"controller has no operation {name!r}")

    def __getitem__(self, name: str) -> Callable:
        return self._operations[name]

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._operations))

    def implementation_for(self, name: str, version: str | None) -> Callable:
        """Pick the implementation of ``name`` for ``version``."""
        if version and version in self._chain:
            operation = self._chain[version].lookup(name)
            if operation is not None:
                return operation
        return get_operation(self._controller, name)

    def _make_operation(self, name: str) -> Callable:
        latest = get_operation(self._controller, name)

        if inspect.iscoroutinefunction(latest):

            @functools.wraps(latest)
            async def operation(*args, **kwargs):
                version = find_api_version(args, kwargs)
                result = self._select(name, version)(*args, **kwargs)
                if inspect.isawaitable(result):
                    result = await result
                return result

        else:

            @functools.wraps(latest)
            def operation(*args, **kwargs):
                version = find_api_version(args, kwargs)
                return self._select(name, version)(*args, **kwargs)

        return operation

    def _select(self, name: str, version: str | None) -> Callable:
        implementation = self.implementation_for(name, version)
        logger.debug("Dispatching versioned operation", operation=name, version=version)
        return implementation


def controller_with_versioning(controller: Any, versions: Mapping[str, Any] | None = None) -> Any:
    """
    Enable per-version behavior on a controller.

    Args:
        controller: Latest controller (object or mapping of callables)
        versions: Older implementations keyed by version token

    Returns:
        ``controller`` unchanged when no versions are given, otherwise a
        ``VersionedController``

    Raises:
        InvalidArgumentError: If the controller is missing
    """
    if controller is None:
        raise InvalidArgumentError("controller_with_versioning", "controller")
    if not versions:
        return controller
    return VersionedController(controller, versions)

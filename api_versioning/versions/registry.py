"""
Supported version range.

Holds the inclusive ``[from, to]`` range of API versions a process serves.
The range is written once at startup (single writer) and read on every request.
"""

from dataclasses import dataclass

import structlog

from api_versioning.exceptions import InvalidArgumentError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class VersionRange:
    """Inclusive range of supported version tokens."""

    from_version: str | None = None  # last supported
    to_version: str | None = None  # latest


class VersionRegistry:
    """
    Owner of the currently supported version range.

    Resolvers and comparators read through a registry instance; tests build
    their own instead of resetting process-wide state.
    """

    def __init__(self) -> None:
        self._range = VersionRange()

    def set_supported_versions(self, from_version: str, to_version: str) -> None:
        """
        Replace the supported range.

        Args:
            from_version: Last supported API version, e.g. ``"v1"``
            to_version: Latest API version, e.g. ``"v3"``

        Raises:
            InvalidArgumentError: If either version is missing or empty
        """
        if not from_version or not to_version:
            raise InvalidArgumentError("set_supported_versions")

        self._range = VersionRange(from_version=from_version, to_version=to_version)
        logger.info(
            "Supported API versions configured",
            from_version=from_version,
            to_version=to_version,
        )

    def get_supported_versions(self) -> VersionRange:
        """Return the current range (``None`` bounds until configured)."""
        return self._range

    def reset(self) -> None:
        """Forget the configured range."""
        self._range = VersionRange()

    @property
    def latest(self) -> str | None:
        return self._range.to_version


# Process-wide registry used when no explicit one is passed
default_registry = VersionRegistry()


def set_supported_versions(from_version: str, to_version: str) -> None:
    """Configure the process-wide supported range."""
    default_registry.set_supported_versions(from_version, to_version)


def get_supported_versions() -> VersionRange:
    """Get the process-wide supported range."""
    return default_registry.get_supported_versions()

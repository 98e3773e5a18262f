"""
Version token parsing and range checks.

Tokens look like ``v<integer>``. Comparison is always ordinal, so ``"v15"``
sorts after ``"v2"``.
"""

import math
import re

from api_versioning.exceptions import InvalidArgumentError
from api_versioning.versions.registry import VersionRegistry, default_registry

VERSION_MARKER = "v"
DIGITS = re.compile(r"[+-]?[0-9]+")


def get_version_number(version: str) -> int | float:
    """
    Return the ordinal of a version token.

    Args:
        version: Version token, e.g. ``"v12"``

    Returns:
        The integer after the marker (``0`` for a bare ``"v"``), or
        ``math.nan`` when the remainder is anything but optionally signed
        decimal digits, e.g. ``"vX"`` or ``"v1_0"``; such tokens never fall
        inside a range

    Raises:
        InvalidArgumentError: If the token is missing or empty
    """
    if not version:
        raise InvalidArgumentError("get_version_number", "version")

    remainder = version.replace(VERSION_MARKER, "", 1).strip()
    if not remainder:
        return 0
    if not DIGITS.fullmatch(remainder):
        return math.nan
    return int(remainder)


def is_version_active(version: str, registry: VersionRegistry | None = None) -> bool:
    """
    Check whether a version lies inside the supported range (inclusive).

    Args:
        version: Version token to check
        registry: Registry to read the range from (default: process-wide)

    Raises:
        InvalidArgumentError: If the token is missing or empty
    """
    if not version:
        raise InvalidArgumentError("is_version_active", "version")

    supported = (registry or default_registry).get_supported_versions()
    if not supported.from_version or not supported.to_version:
        return False

    number = get_version_number(version)
    return (
        get_version_number(supported.from_version)
        <= number
        <= get_version_number(supported.to_version)
    )


def version_sort_key(version: str) -> tuple:
    """Ordinal sort key; malformed tokens sort last, by string."""
    number = get_version_number(version)
    if math.isnan(number):
        return (1, 0, version)
    return (0, number, version)

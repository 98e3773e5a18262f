"""
Version range registry and token comparison.
"""

from api_versioning.versions.parsing import (
    get_version_number,
    is_version_active,
    version_sort_key,
)
from api_versioning.versions.registry import (
    VersionRange,
    VersionRegistry,
    default_registry,
    get_supported_versions,
    set_supported_versions,
)

__all__ = [
    # Registry
    "VersionRange",
    "VersionRegistry",
    "default_registry",
    "get_supported_versions",
    "set_supported_versions",
    # Parsing
    "get_version_number",
    "is_version_active",
    "version_sort_key",
]

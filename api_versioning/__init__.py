"""
API version negotiation for FastAPI applications.

Resolves the requested API version from a header or a URL segment, rejects
versions outside the supported range, and dispatches controller operations
to the implementation of the resolved version.
"""

from api_versioning.dispatch import (
    ChainNode,
    VersionedController,
    build_version_chain,
    controller_with_versioning,
)
from api_versioning.exceptions import (
    ErrorCode,
    InvalidArgumentError,
    UnsupportedVersionError,
    VersioningException,
)
from api_versioning.middleware import (
    HeaderVersionResolver,
    UrlVersionResolver,
    VersionResolver,
    get_api_version,
    header_middleware,
    install_exception_handlers,
    url_middleware,
    version_rejection_handler,
)
from api_versioning.registration import VersioningConfig, with_versioning
from api_versioning.versions import (
    VersionRange,
    VersionRegistry,
    default_registry,
    get_supported_versions,
    get_version_number,
    is_version_active,
    set_supported_versions,
)

__version__ = "0.1.0"

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
    # Resolution
    "VersionResolver",
    "HeaderVersionResolver",
    "UrlVersionResolver",
    "header_middleware",
    "url_middleware",
    "get_api_version",
    "version_rejection_handler",
    "install_exception_handlers",
    # Dispatch
    "ChainNode",
    "VersionedController",
    "build_version_chain",
    "controller_with_versioning",
    # Registration
    "VersioningConfig",
    "with_versioning",
    # Errors
    "ErrorCode",
    "VersioningException",
    "InvalidArgumentError",
    "UnsupportedVersionError",
]

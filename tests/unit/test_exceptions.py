"""
Unit tests for versioning exceptions.
"""

from api_versioning import (
    ErrorCode,
    InvalidArgumentError,
    UnsupportedVersionError,
    VersioningException,
)


class TestVersioningException:
    """Tests for the base exception."""

    def test_creation(self):
        error = VersioningException(
            message="Test error",
            error_code=ErrorCode.INVALID_ARGUMENT,
            context={"key": "value"},
        )

        assert error.message == "Test error"
        assert error.error_code == ErrorCode.INVALID_ARGUMENT
        assert error.status_code == 500
        assert error.context == {"key": "value"}
        assert str(error) == "Test error"

    def test_to_dict(self):
        error = VersioningException(message="Boom", error_code=ErrorCode.INVALID_ARGUMENT)
        assert error.to_dict() == {
            "error": "INVALID_ARGUMENT",
            "message": "Boom",
            "type": "VersioningException",
        }


class TestInvalidArgumentError:
    def test_context(self):
        error = InvalidArgumentError("set_supported_versions", "from_version")

        assert isinstance(error, VersioningException)
        assert error.error_code == ErrorCode.INVALID_ARGUMENT
        assert error.context == {
            "function": "set_supported_versions",
            "argument": "from_version",
        }
        assert "set_supported_versions" in error.message


class TestUnsupportedVersionError:
    def test_client_payload(self):
        error = UnsupportedVersionError("v7")

        assert error.status_code == 400
        assert error.error_code == ErrorCode.UNSUPPORTED_API_VERSION
        assert error.context == {"version": "v7"}
        assert error.to_dict() == {"message": "Requested API version is not supported"}

    def test_extra_context(self):
        error = UnsupportedVersionError("v0", context={"source": "url"})
        assert error.context == {"source": "url", "version": "v0"}

"""
Unit tests for the supported version registry.
"""

import dataclasses

import pytest

from api_versioning import (
    InvalidArgumentError,
    VersionRange,
    VersionRegistry,
    get_supported_versions,
    set_supported_versions,
)


class TestVersionRegistry:
    """Tests for VersionRegistry."""

    def test_unconfigured_range(self):
        """A new registry has no bounds."""
        assert VersionRegistry().get_supported_versions() == VersionRange(None, None)

    @pytest.mark.parametrize(
        "from_version,to_version",
        [(None, None), (None, "v2"), ("", "v2"), ("v1", ""), ("v1", None)],
    )
    def test_rejects_missing_bounds(self, from_version, to_version):
        """Missing or empty bounds raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            VersionRegistry().set_supported_versions(from_version, to_version)

    def test_last_write_wins(self):
        """Reconfiguring replaces the previous range."""
        registry = VersionRegistry()
        registry.set_supported_versions("v1", "v2")
        registry.set_supported_versions("v4", "v5")

        supported = registry.get_supported_versions()
        assert supported.from_version == "v4"
        assert supported.to_version == "v5"
        assert registry.latest == "v5"

    def test_failed_write_keeps_range(self):
        """An invalid call leaves the range untouched."""
        registry = VersionRegistry()
        registry.set_supported_versions("v1", "v2")
        with pytest.raises(InvalidArgumentError):
            registry.set_supported_versions("", "v3")
        assert registry.get_supported_versions() == VersionRange("v1", "v2")

    def test_returned_range_is_read_only(self):
        """Callers cannot change the registry through the returned range."""
        registry = VersionRegistry()
        registry.set_supported_versions("v1", "v2")
        with pytest.raises(dataclasses.FrozenInstanceError):
            registry.get_supported_versions().to_version = "v9"

    def test_reset(self):
        registry = VersionRegistry()
        registry.set_supported_versions("v1", "v2")
        registry.reset()
        assert registry.latest is None


class TestDefaultRegistry:
    """Tests for the process-wide registry functions."""

    def test_set_and_get(self):
        set_supported_versions("v4", "v5")
        assert get_supported_versions() == VersionRange(from_version="v4", to_version="v5")

    def test_set_rejects_missing_bounds(self):
        with pytest.raises(InvalidArgumentError):
            set_supported_versions(None, None)

"""
Tests for the magisk-hluda exceptions module.

Tests the custom exception hierarchy including:
- Base HludaError and error message formatting
- API errors (APIError, MalformedReleaseError)
- ReleaseNotFoundError
- DownloadError
- FileSystemError
"""

import pytest

from magisk_hluda.exceptions import (
    APIError,
    DownloadError,
    FileSystemError,
    HludaError,
    MalformedReleaseError,
    ReleaseNotFoundError,
)

pytestmark = pytest.mark.unit


class TestHludaError:
    """Test base HludaError exception."""

    def test_basic_message(self):
        error = HludaError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.details is None

    def test_message_with_details(self):
        error = HludaError("Operation failed", details="Connection timeout")
        assert str(error) == "Operation failed - Connection timeout"
        assert error.details == "Connection timeout"

    def test_can_be_caught_as_exception(self):
        with pytest.raises(Exception):
            raise HludaError("Test")


class TestAPIError:
    def test_attributes(self):
        error = APIError(
            "HTTP Error fetching releases: 500",
            endpoint="https://api.github.com/repos/Ylarod/Florida/releases",
            status_code=500,
            details="Internal Server Error",
        )
        assert error.endpoint.endswith("/releases")
        assert error.status_code == 500
        assert str(error) == "HTTP Error fetching releases: 500 - Internal Server Error"

    def test_malformed_release_is_api_error(self):
        error = MalformedReleaseError("Malformed release entry", details="bad")
        assert isinstance(error, APIError)
        assert isinstance(error, HludaError)
        assert error.status_code is None


class TestReleaseNotFoundError:
    def test_default_message(self):
        error = ReleaseNotFoundError(scanned=10)
        assert str(error) == "No recent release found with florida-server assets"
        assert error.scanned == 10
        assert isinstance(error, HludaError)
        assert not isinstance(error, APIError)


class TestDownloadError:
    def test_attributes(self):
        error = DownloadError(
            "Download failed for arm64: HTTP 404",
            architecture="arm64",
            url="https://example.com/x.gz",
            status_code=404,
            details="Not Found",
        )
        assert error.architecture == "arm64"
        assert error.url == "https://example.com/x.gz"
        assert error.status_code == 404
        assert str(error) == "Download failed for arm64: HTTP 404 - Not Found"

    def test_defaults(self):
        error = DownloadError("Download failed")
        assert error.architecture is None
        assert error.url is None
        assert error.status_code is None


class TestFileSystemError:
    def test_path(self):
        error = FileSystemError("Could not write", path="bin/florida-arm.gz")
        assert error.path == "bin/florida-arm.gz"
        assert isinstance(error, HludaError)

    def test_hierarchy_is_catchable_from_base(self):
        for exc in (
            APIError("a"),
            MalformedReleaseError("b"),
            ReleaseNotFoundError(),
            DownloadError("c"),
            FileSystemError("d"),
        ):
            with pytest.raises(HludaError):
                raise exc

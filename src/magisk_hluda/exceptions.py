"""
Custom exceptions for magisk-hluda.

Every failure in a packaging run is fatal; these exceptions carry enough
context (endpoint, architecture, path, status code) for the entry point to
report a useful message before exiting.
"""


class HludaError(Exception):
    """
    Base exception for all magisk-hluda errors.

    All custom exceptions should inherit from this class so the entry point
    can catch every application-specific error in one place.
    """

    def __init__(self, message: str, details: str | None = None) -> None:
        """
        Initialize the exception.

        Args:
            message: The primary error message.
            details: Optional additional context about the error.
        """
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


# =============================================================================
# API Errors
# =============================================================================


class APIError(HludaError):
    """
    Exception raised when the release API is unreachable or misbehaves.

    This includes:
    - Transport failures (DNS, connection refused, timeouts)
    - Non-success HTTP status codes
    - Response bodies that are not valid JSON or have an unexpected shape
    """

    def __init__(
        self,
        message: str,
        endpoint: str | None = None,
        status_code: int | None = None,
        details: str | None = None,
    ) -> None:
        """
        Initialize the API exception.

        Args:
            message: The primary error message.
            endpoint: The API endpoint that was accessed.
            status_code: The HTTP status code returned, if any.
            details: Optional additional context.
        """
        super().__init__(message, details)
        self.endpoint = endpoint
        self.status_code = status_code


class MalformedReleaseError(APIError):
    """Exception raised when a release payload fails validation."""

    pass


class ReleaseNotFoundError(HludaError):
    """
    Exception raised when no release with server assets could be found.

    Attributes:
        scanned: Number of releases inspected before giving up.
    """

    def __init__(
        self,
        message: str = "No recent release found with florida-server assets",
        scanned: int = 0,
        details: str | None = None,
    ) -> None:
        super().__init__(message, details)
        self.scanned = scanned


# =============================================================================
# Download Errors
# =============================================================================


class DownloadError(HludaError):
    """
    Exception raised when a server binary could not be downloaded.

    Attributes:
        architecture: The architecture whose download failed (e.g. "arm64").
        url: The URL that was being downloaded.
        status_code: The HTTP status code, when the server answered.
    """

    def __init__(
        self,
        message: str,
        architecture: str | None = None,
        url: str | None = None,
        status_code: int | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message, details)
        self.architecture = architecture
        self.url = url
        self.status_code = status_code


# =============================================================================
# File System Errors
# =============================================================================


class FileSystemError(HludaError):
    """
    Exception raised when a local output file cannot be created or written.

    Attributes:
        path: The file path that caused the error.
    """

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message, details)
        self.path = path

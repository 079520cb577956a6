import importlib.metadata
from typing import Any, Dict, Optional

import requests

from magisk_hluda.constants import (
    ERROR_BODY_PREVIEW_CHARS,
    GITHUB_API_TIMEOUT,
    GITHUB_API_VERSION,
    RATE_LIMIT_WARNING_THRESHOLD,
)
from magisk_hluda.log_utils import logger

# Cache for the User-Agent string to avoid repeated metadata lookups
_USER_AGENT_CACHE = None


def get_user_agent() -> str:
    """
    Get the User-Agent string used for HTTP requests.

    Returns:
        The string `magisk-hluda/{version}`, where `{version}` is the installed package version or `unknown` if the version cannot be determined.
    """
    global _USER_AGENT_CACHE

    if _USER_AGENT_CACHE is None:
        try:
            app_version = importlib.metadata.version("magisk-hluda")
        except importlib.metadata.PackageNotFoundError:
            app_version = "unknown"

        _USER_AGENT_CACHE = f"magisk-hluda/{app_version}"

    return _USER_AGENT_CACHE


def create_session(github_token: Optional[str] = None) -> requests.Session:
    """
    Create a requests Session preconfigured with GitHub API headers.

    Parameters:
        github_token (Optional[str]): Token sent as `Authorization: token ...` when provided.

    Returns:
        requests.Session: Session carrying Accept, X-GitHub-Api-Version and User-Agent headers.
    """
    session = requests.Session()
    session.headers.update(
        {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": get_user_agent(),
        }
    )
    if github_token:
        session.headers["Authorization"] = f"token {github_token}"
        logger.debug("Using GitHub token for API authentication")
    else:
        logger.debug("No GitHub token available - using unauthenticated API requests")
    return session


def _parse_rate_limit_header(header_value: Any) -> Optional[int]:
    """
    Parse an X-RateLimit-Remaining header value into an int, or None when absent or invalid.
    """
    if header_value is None:
        return None
    try:
        return int(str(header_value).strip())
    except (TypeError, ValueError):
        return None


def _log_rate_limit(response: requests.Response) -> None:
    headers = getattr(response, "headers", None)
    if headers is None or not hasattr(headers, "get"):
        return
    remaining = _parse_rate_limit_header(headers.get("X-RateLimit-Remaining"))
    if remaining is None:
        return
    logger.debug(f"GitHub API rate-limit remaining: {remaining}")
    if remaining <= RATE_LIMIT_WARNING_THRESHOLD:
        logger.warning(
            f"GitHub API rate limit running low: {remaining} requests remaining"
        )


def make_github_api_request(
    session: requests.Session,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: Optional[int] = None,
) -> requests.Response:
    """
    Perform a single GitHub API GET request and log rate-limit information.

    The response is returned whatever its status code; callers decide which
    statuses are acceptable. No retries are attempted.

    Parameters:
        session (requests.Session): Session used for the request.
        url (str): GitHub API URL to request.
        params (Optional[Dict[str, Any]]): Query parameters to include in the request.
        timeout (Optional[int]): Request timeout in seconds; the module default is used when omitted.

    Returns:
        requests.Response: The HTTP response returned by GitHub.

    Raises:
        requests.RequestException: For network or transport errors.
    """
    logger.debug(f"Making GitHub API request: {url}")
    response = session.get(url, params=params, timeout=timeout or GITHUB_API_TIMEOUT)
    logger.debug(f"Received HTTP {response.status_code} for {url}")
    _log_rate_limit(response)
    return response


def body_preview(response: requests.Response) -> str:
    """
    Return the beginning of a response body as text, for error messages.
    """
    try:
        text = response.text or ""
    except (AttributeError, UnicodeDecodeError, TypeError):
        return ""
    if not isinstance(text, str):
        return ""
    text = text.strip()
    if len(text) > ERROR_BODY_PREVIEW_CHARS:
        return text[:ERROR_BODY_PREVIEW_CHARS] + "..."
    return text

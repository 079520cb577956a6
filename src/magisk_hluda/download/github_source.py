"""
GitHub Release Source

This module fetches florida releases from the GitHub REST API and decodes
the JSON payloads into Release objects.
"""

import json
from typing import Any, Dict, List, Optional, Union

import requests

from magisk_hluda.constants import (
    FLORIDA_REPOSITORY,
    GITHUB_API_BASE,
    RELEASE_SCAN_COUNT,
    SERVER_ASSET_MARKER,
)
from magisk_hluda.exceptions import APIError, MalformedReleaseError
from magisk_hluda.log_utils import logger
from magisk_hluda.utils import body_preview, make_github_api_request

from .interfaces import Asset, Release


def has_server_assets(release: Union[Release, Dict[str, Any], Any]) -> bool:
    """
    Check whether a release ships at least one florida-server binary.

    Accepts either a decoded Release or a raw release dict from the API. Raw
    payloads whose `assets` field is absent or not a list never qualify; asset
    entries that are not dicts or lack a string `name` are ignored.

    Returns:
        bool: `True` if any asset name contains "florida-server-", `False` otherwise.
    """
    if isinstance(release, Release):
        return any(SERVER_ASSET_MARKER in asset.name for asset in release.assets)

    if not isinstance(release, dict):
        return False
    assets = release.get("assets")
    if not isinstance(assets, list):
        return False
    for asset in assets:
        if not isinstance(asset, dict):
            continue
        name = asset.get("name")
        if isinstance(name, str) and SERVER_ASSET_MARKER in name:
            return True
    return False


def parse_release(release_data: Any) -> Release:
    """
    Decode a raw GitHub release object into a Release.

    Parameters:
        release_data (Any): One release object from the GitHub API.

    Returns:
        Release: Release with its valid assets in API order. A missing `assets` field yields an empty list.

    Raises:
        MalformedReleaseError: If the payload is not an object, `tag_name` is missing or blank,
            or `assets` is present but not a list.
    """
    if not isinstance(release_data, dict):
        raise MalformedReleaseError(
            "Malformed release entry",
            details=f"expected object, got {type(release_data).__name__}",
        )

    tag_name = release_data.get("tag_name")
    if not isinstance(tag_name, str) or not tag_name.strip():
        raise MalformedReleaseError(
            "Malformed release entry", details="missing or invalid tag_name"
        )

    assets_data = release_data.get("assets", [])
    if not isinstance(assets_data, list):
        raise MalformedReleaseError(
            f"Malformed release {tag_name}", details="assets is not a list"
        )

    assets: List[Asset] = []
    for asset_data in assets_data:
        if not isinstance(asset_data, dict):
            logger.debug(f"Skipping malformed asset for release {tag_name}")
            continue
        name = asset_data.get("name")
        if not isinstance(name, str) or not name:
            logger.debug(f"Skipping asset with invalid name for release {tag_name}")
            continue
        assets.append(Asset(name=name))

    return Release(tag_name=tag_name, assets=assets)


class GithubReleaseSource:
    """
    Thin client for the two release endpoints the selector needs.

    Usage:
        source = GithubReleaseSource(session)
        release_data = source.get_release_by_tag("17.2.0")
        recent = source.list_releases(per_page=10)
    """

    def __init__(
        self,
        session: requests.Session,
        repository: str = FLORIDA_REPOSITORY,
        api_base: str = GITHUB_API_BASE,
    ):
        """
        Parameters:
            session (requests.Session): Session used for all API requests.
            repository (str): owner/name slug of the repository publishing the releases.
            api_base (str): Base URL of the GitHub repos API.
        """
        self.session = session
        self.releases_url = f"{api_base}/{repository}/releases"

    def get_release_by_tag(self, tag: str) -> Optional[Dict[str, Any]]:
        """
        Fetch the release whose tag exactly equals `tag`.

        Returns:
            Optional[Dict[str, Any]]: The raw release object, or None when GitHub reports 404.

        Raises:
            APIError: On transport failure, any other non-success status, or a non-JSON body.
        """
        url = f"{self.releases_url}/tags/{tag}"
        response = self._get(url)
        if response.status_code == 404:
            return None
        self._raise_for_status(url, response)
        return self._decode(url, response)

    def list_releases(self, per_page: int = RELEASE_SCAN_COUNT) -> List[Any]:
        """
        Fetch the most recent releases, newest first.

        Parameters:
            per_page (int): Number of releases to request.

        Returns:
            List[Any]: Raw release objects in API order.

        Raises:
            APIError: On transport failure, a non-success status, or a body that is not a non-empty JSON array.
        """
        url = self.releases_url
        response = self._get(url, params={"per_page": per_page})
        self._raise_for_status(url, response)
        data = self._decode(url, response)
        if not isinstance(data, list) or not data:
            raise APIError(
                "Invalid JSON response: expected non-empty array of releases",
                endpoint=url,
                status_code=response.status_code,
            )
        return data

    def _get(
        self, url: str, params: Optional[Dict[str, Any]] = None
    ) -> requests.Response:
        try:
            return make_github_api_request(self.session, url, params=params)
        except requests.RequestException as exc:
            raise APIError(
                "Error contacting the GitHub API", endpoint=url, details=str(exc)
            ) from exc

    @staticmethod
    def _raise_for_status(url: str, response: requests.Response) -> None:
        if response.status_code != 200:
            raise APIError(
                f"HTTP Error fetching releases: {response.status_code}",
                endpoint=url,
                status_code=response.status_code,
                details=body_preview(response) or None,
            )

    @staticmethod
    def _decode(url: str, response: requests.Response) -> Any:
        try:
            return response.json()
        except (json.JSONDecodeError, ValueError) as exc:
            raise APIError(
                "Invalid JSON response from the GitHub API",
                endpoint=url,
                status_code=response.status_code,
                details=str(exc),
            ) from exc

"""
Release Selection

Decides which florida release tag gets packaged: a pinned version when it
exists and ships server binaries, otherwise the newest recent release that
does.
"""

from pathlib import Path
from typing import Optional

from magisk_hluda.constants import CURRENT_TAG_FILE, RELEASE_SCAN_COUNT
from magisk_hluda.exceptions import APIError, MalformedReleaseError, ReleaseNotFoundError
from magisk_hluda.log_utils import logger

from .files import Pathish, write_text
from .github_source import GithubReleaseSource, has_server_assets, parse_release


class ReleaseSelector:
    """
    Selects the release tag to package.

    Selection runs in two phases:
    1. If a preferred version is given, look it up by tag and use it when it
       has florida-server assets.
    2. Otherwise (or when the preferred version is missing or unusable) scan
       the most recent releases newest-first and take the first one with
       florida-server assets.

    The chosen tag is written to a marker file for external tooling.
    """

    def __init__(
        self,
        source: GithubReleaseSource,
        marker_path: Pathish = CURRENT_TAG_FILE,
        scan_count: int = RELEASE_SCAN_COUNT,
    ):
        """
        Parameters:
            source (GithubReleaseSource): Client for the release endpoints.
            marker_path (Pathish): File overwritten with the selected tag.
            scan_count (int): Number of recent releases inspected during auto-pick.
        """
        self.source = source
        self.marker_path = Path(marker_path)
        self.scan_count = scan_count

    def select_tag(self, preferred_version: Optional[str] = None) -> str:
        """
        Determine the release tag to package.

        Parameters:
            preferred_version (Optional[str]): Tag to pin, looked up verbatim; empty or None skips straight to auto-pick.

        Returns:
            str: The selected tag, also written to the marker file.

        Raises:
            APIError: If the recent releases cannot be fetched or are malformed.
            ReleaseNotFoundError: If none of the recent releases has server assets.
            FileSystemError: If the marker file cannot be written.
        """
        if preferred_version:
            tag = self._try_preferred(preferred_version)
            if tag is not None:
                return self._record(tag)

        return self._record(self._auto_pick())

    def _try_preferred(self, preferred: str) -> Optional[str]:
        logger.info(f"Preferred version specified: {preferred}")
        try:
            release_data = self.source.get_release_by_tag(preferred)
        except APIError as exc:
            logger.warning(
                f"Version {preferred} could not be fetched ({exc}), falling back to auto-pick"
            )
            return None

        if release_data is None:
            logger.warning(
                f"Version {preferred} not found (HTTP 404), falling back to auto-pick"
            )
            return None

        try:
            release = parse_release(release_data)
        except MalformedReleaseError as exc:
            logger.warning(
                f"Version {preferred} returned a malformed release ({exc}), falling back to auto-pick"
            )
            return None

        if not has_server_assets(release):
            logger.warning(
                f"Version {preferred} exists but has no server assets, falling back to auto-pick"
            )
            return None

        logger.info(f"Preferred version {preferred} found with server assets!")
        return preferred

    def _auto_pick(self) -> str:
        logger.info("Auto-picking latest version with server assets...")
        releases_data = self.source.list_releases(per_page=self.scan_count)

        for release_data in releases_data:
            try:
                release = parse_release(release_data)
            except MalformedReleaseError as exc:
                tag_name = (
                    release_data.get("tag_name")
                    if isinstance(release_data, dict)
                    else None
                )
                if isinstance(tag_name, str) and tag_name.strip():
                    logger.info(f"Skipping release {tag_name} (no server assets)")
                else:
                    logger.debug(f"Skipping release entry: {exc}")
                continue

            if has_server_assets(release):
                logger.info(f"Found release with server assets: {release.tag_name}")
                return release.tag_name

            logger.info(f"Skipping release {release.tag_name} (no server assets)")

        raise ReleaseNotFoundError(scanned=len(releases_data))

    def _record(self, tag: str) -> str:
        write_text(self.marker_path, tag)
        logger.debug(f"Wrote selected tag {tag} to {self.marker_path}")
        return tag

"""
Server Binary Fetcher

Downloads the florida-server binary of a release for every supported
Android architecture into the module's bin directory.
"""

import time
from pathlib import Path
from typing import Iterable, List

import requests

from magisk_hluda.constants import BIN_DIR_NAME, DOWNLOAD_TIMEOUT, FLORIDA_DOWNLOAD_BASE
from magisk_hluda.exceptions import DownloadError
from magisk_hluda.log_utils import logger
from magisk_hluda.utils import body_preview

from .files import Pathish, ensure_directory_exists, write_bytes
from .interfaces import Architecture, DownloadedArtifact


class ArtifactFetcher:
    """
    Fetches per-architecture florida-server binaries for a release tag.

    Downloads run sequentially in Architecture order and stop at the first
    failure; binaries written before the failure are left in place.
    """

    def __init__(
        self,
        session: requests.Session,
        output_dir: Pathish = BIN_DIR_NAME,
        download_base: str = FLORIDA_DOWNLOAD_BASE,
        architectures: Iterable[Architecture] = tuple(Architecture),
    ):
        """
        Parameters:
            session (requests.Session): Session used for the downloads.
            output_dir (Pathish): Directory receiving `florida-<arch>.gz` files.
            download_base (str): Release download URL prefix; the tag and asset name are appended.
            architectures (Iterable[Architecture]): Architectures to fetch, in order.
        """
        self.session = session
        self.output_dir = Path(output_dir)
        self.download_base = download_base.rstrip("/")
        self.architectures = tuple(architectures)

    def build_url(self, tag: str, architecture: Architecture) -> str:
        return f"{self.download_base}/{tag}/{architecture.asset_name(tag)}"

    def target_path(self, architecture: Architecture) -> Path:
        return self.output_dir / architecture.output_file

    def fetch_all(self, tag: str) -> List[DownloadedArtifact]:
        """
        Download the server binary of `tag` for every architecture.

        Parameters:
            tag (str): Selected release tag.

        Returns:
            List[DownloadedArtifact]: One entry per architecture, in download order.

        Raises:
            DownloadError: For the first architecture whose download fails; later
                architectures are not attempted.
            FileSystemError: If the output directory or a binary cannot be written.
        """
        ensure_directory_exists(self.output_dir)

        artifacts: List[DownloadedArtifact] = []
        for architecture in self.architectures:
            try:
                artifacts.append(self.fetch(tag, architecture))
            except DownloadError as exc:
                logger.error(f"Error downloading {architecture.value}: {exc}")
                raise
        return artifacts

    def fetch(self, tag: str, architecture: Architecture) -> DownloadedArtifact:
        """
        Download and write the server binary of `tag` for a single architecture.

        The response is checked before anything is written, so an error page is
        never stored as a binary.

        Raises:
            DownloadError: On transport failure or a non-200 status.
            FileSystemError: If the binary cannot be written.
        """
        start = time.perf_counter()
        url = self.build_url(tag, architecture)
        logger.info(f"Starting download of florida for arch: {architecture.value}")
        logger.debug(f"Downloading {url}")

        try:
            response = self.session.get(
                url,
                headers={"Accept": "application/octet-stream"},
                allow_redirects=True,
                timeout=DOWNLOAD_TIMEOUT,
            )
        except requests.RequestException as exc:
            raise DownloadError(
                f"Download failed for {architecture.value}",
                architecture=architecture.value,
                url=url,
                details=str(exc),
            ) from exc

        if response.status_code != 200:
            raise DownloadError(
                f"Download failed for {architecture.value}: HTTP {response.status_code}",
                architecture=architecture.value,
                url=url,
                status_code=response.status_code,
                details=body_preview(response) or None,
            )

        path = self.target_path(architecture)
        payload = response.content
        ensure_directory_exists(path.parent)
        write_bytes(path, payload)

        elapsed = time.perf_counter() - start
        logger.info(
            f"Successfully downloaded florida for arch: {architecture.value}. Took {elapsed:.2f}s"
        )
        return DownloadedArtifact(
            architecture=architecture,
            url=url,
            path=path,
            size=len(payload),
            elapsed=elapsed,
        )

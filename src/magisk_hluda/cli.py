# src/magisk_hluda/cli.py

import argparse
import sys
from typing import List, Optional

import requests

from magisk_hluda.download import ArtifactFetcher, GithubReleaseSource, ReleaseSelector
from magisk_hluda.env_utils import Settings, load_settings
from magisk_hluda.exceptions import HludaError
from magisk_hluda.log_utils import logger
from magisk_hluda.metadata import MetadataRenderer
from magisk_hluda.utils import create_session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="magisk-hluda",
        description="Package florida-server binaries into a Magisk module",
    )
    parser.add_argument(
        "version",
        nargs="?",
        default="",
        help="Release tag to package; falls back to the newest release with server binaries",
    )
    return parser


def run(
    preferred_version: Optional[str],
    settings: Settings,
    session: requests.Session,
) -> str:
    """
    Run one packaging pass: select a tag, render the metadata, download the binaries.

    Parameters:
        preferred_version (Optional[str]): Tag to pin, or empty for auto-pick.
        settings (Settings): Identity fields and output locations.
        session (requests.Session): Session shared by the API and download requests.

    Returns:
        str: The packaged release tag.
    """
    selector = ReleaseSelector(
        GithubReleaseSource(session), marker_path=settings.marker_path
    )
    tag = selector.select_tag(preferred_version)

    MetadataRenderer(settings).write_all(tag)

    ArtifactFetcher(session, output_dir=settings.bin_dir).fetch_all(tag)
    logger.info(f"Packaged florida {tag}")
    return tag


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the magisk-hluda command-line interface.

    Returns:
        int: 0 on success, 1 when any step fails (the error is logged).
    """
    args = build_parser().parse_args(argv)
    settings = load_settings()
    session = create_session(settings.github_token)
    try:
        run(args.version, settings, session)
    except (HludaError, requests.RequestException, OSError) as error:
        logger.error(f"Error: {error}")
        return 1
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())

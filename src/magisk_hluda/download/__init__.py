"""
magisk-hluda Download Subsystem

Core Components:
- interfaces: Release, Asset and Architecture data structures
- github_source: GitHub release API client and release decoding
- selector: Release tag selection policy
- fetcher: Per-architecture server binary downloads
- files: Atomic file writes
"""

from .fetcher import ArtifactFetcher
from .github_source import GithubReleaseSource, has_server_assets, parse_release
from .interfaces import Architecture, Asset, DownloadedArtifact, Release
from .selector import ReleaseSelector

__all__ = [
    # Interfaces
    "Architecture",
    "Asset",
    "DownloadedArtifact",
    "Release",
    # Components
    "ArtifactFetcher",
    "GithubReleaseSource",
    "ReleaseSelector",
    # Helpers
    "has_server_assets",
    "parse_release",
]

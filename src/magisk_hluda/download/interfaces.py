"""
Core data structures for the magisk-hluda download subsystem.

This module defines the release entities decoded from the GitHub API and the
fixed set of Android architectures the module ships binaries for.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List

from magisk_hluda.constants import GZIP_EXTENSION, OUTPUT_FILE_PREFIX


@dataclass(frozen=True)
class Asset:
    """Represents a downloadable asset attached to a release."""

    name: str
    """The filename of the asset"""


@dataclass(frozen=True)
class Release:
    """Represents a release of the florida repository."""

    tag_name: str
    """The release tag/version identifier (e.g., '17.2.0')"""

    assets: List[Asset] = field(default_factory=list)
    """Assets attached to the release, in API order"""


class Architecture(Enum):
    """Android ABIs a florida-server binary is packaged for, in download order."""

    ARM = "arm"
    ARM64 = "arm64"
    X86 = "x86"
    X86_64 = "x86_64"

    @property
    def output_name(self) -> str:
        """Name used for the local file; the module scripts expect `x64` for x86_64."""
        return _OUTPUT_NAMES.get(self, self.value)

    @property
    def output_file(self) -> str:
        return f"{OUTPUT_FILE_PREFIX}{self.output_name}{GZIP_EXTENSION}"

    def asset_name(self, tag: str) -> str:
        """
        Return the release asset name of the server binary for this architecture.

        Parameters:
            tag (str): Release tag the binary belongs to.

        Returns:
            str: e.g. `florida-server-17.2.0-android-arm64.gz`.
        """
        return f"florida-server-{tag}-android-{self.value}{GZIP_EXTENSION}"


_OUTPUT_NAMES = {Architecture.X86_64: "x64"}


@dataclass
class DownloadedArtifact:
    """Outcome of one successful architecture download."""

    architecture: Architecture
    url: str
    path: Path
    size: int
    elapsed: float
    """Wall-clock seconds spent downloading and writing"""

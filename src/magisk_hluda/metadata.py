"""
Module metadata rendering.

Renders the Magisk module descriptor (module.prop) and the update feed
(update.json) for a selected florida release tag.
"""

import json
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from magisk_hluda.constants import (
    CHANGELOG_URL,
    GITHUB_WEB_BASE,
    MODULE_AUTHOR_SUFFIX,
    MODULE_DESCRIPTION,
    MODULE_ID,
    MODULE_NAME,
    MODULE_PROP_FILE,
    MODULE_ZIP_PREFIX,
    UPDATE_JSON_FILE,
)
from magisk_hluda.download.files import ensure_directory_exists, write_text
from magisk_hluda.env_utils import Settings
from magisk_hluda.log_utils import logger


def module_version(tag: str) -> str:
    """Return `tag` truncated at its first hyphen ("17.2.0-android" -> "17.2.0")."""
    return tag.split("-", 1)[0]


def version_code(tag: str) -> str:
    """
    Return `tag` with every dot removed.

    Only dots are stripped, so suffixed tags keep their suffix
    ("17.2.0-android" -> "1720-android").
    """
    return tag.replace(".", "")


def update_json_url(repository: str) -> str:
    return f"{GITHUB_WEB_BASE}/{repository}/releases/latest/download/{UPDATE_JSON_FILE}"


def module_zip_url(repository: str, tag: str) -> str:
    return (
        f"{GITHUB_WEB_BASE}/{repository}/releases/download/"
        f"{tag}/{MODULE_ZIP_PREFIX}{tag}.zip"
    )


def render_module_prop(tag: str, settings: Settings) -> str:
    """
    Render the module.prop descriptor for `tag`.

    Returns:
        str: key=value lines separated by newlines, without a trailing newline.
    """
    lines = [
        f"id={MODULE_ID}",
        f"name={MODULE_NAME}",
        f"version={module_version(tag)}",
        f"versionCode={version_code(tag)}",
        f"author={settings.author}{MODULE_AUTHOR_SUFFIX}",
        f"description={MODULE_DESCRIPTION}",
        f"updateJson={update_json_url(settings.repository)}",
    ]
    return "\n".join(lines)


def build_update_manifest(tag: str, settings: Settings) -> Dict[str, Any]:
    """
    Build the update feed mapping for `tag`.

    `versionCode` is an integer when the dot-stripped tag is purely numeric.
    Suffixed tags keep their string form so the feed stays valid JSON.
    """
    code: Union[int, str] = version_code(tag)
    if code.isdigit():
        code = int(code)
    else:
        logger.warning(
            f"versionCode '{code}' derived from tag {tag} is not numeric; writing it as a string"
        )
    return {
        "version": tag,
        "versionCode": code,
        "zipUrl": module_zip_url(settings.repository, tag),
        "changelog": CHANGELOG_URL,
    }


def render_update_json(tag: str, settings: Settings) -> str:
    return json.dumps(build_update_manifest(tag, settings), indent=2) + "\n"


class MetadataRenderer:
    """Writes module.prop and update.json for a selected tag."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def module_prop_path(self) -> Path:
        return Path(self.settings.module_template_dir) / MODULE_PROP_FILE

    def write_module_prop(self, tag: str) -> Path:
        path = self.module_prop_path
        ensure_directory_exists(path.parent)
        write_text(path, render_module_prop(tag, self.settings))
        logger.info(f"Wrote {path}")
        return path

    def write_update_json(self, tag: str) -> Path:
        path = Path(self.settings.update_json_path)
        if path.parent != Path("."):
            ensure_directory_exists(path.parent)
        write_text(path, render_update_json(tag, self.settings))
        logger.info(f"Wrote {path}")
        return path

    def write_all(self, tag: str) -> Tuple[Path, Path]:
        """
        Render both metadata files for `tag`.

        Returns:
            Tuple[Path, Path]: Paths of the written module.prop and update.json.

        Raises:
            FileSystemError: If either file cannot be written.
        """
        return self.write_module_prop(tag), self.write_update_json(tag)

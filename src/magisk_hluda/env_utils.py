"""
Environment-derived settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from magisk_hluda.constants import (
    ACTOR_ENV_VAR,
    BIN_DIR_NAME,
    CURRENT_TAG_FILE,
    DEFAULT_AUTHOR,
    DEFAULT_REPOSITORY,
    MODULE_TEMPLATE_DIR,
    REPOSITORY_ENV_VAR,
    TOKEN_ENV_VAR,
    UPDATE_JSON_FILE,
)


def get_env_or_default(
    name: str, fallback: str, environ: Optional[Mapping[str, str]] = None
) -> str:
    """
    Return the value of environment variable `name`, or `fallback` when it is unset or empty.
    """
    env = os.environ if environ is None else environ
    value = env.get(name)
    return value if value else fallback


@dataclass(frozen=True)
class Settings:
    """Identity fields and output locations for one packaging run."""

    repository: str = DEFAULT_REPOSITORY
    """Owner/name slug of the repository publishing the module"""

    author: str = DEFAULT_AUTHOR
    """Name credited first in the module author line"""

    github_token: Optional[str] = None
    """Optional token for authenticated GitHub API requests"""

    module_template_dir: Path = Path(MODULE_TEMPLATE_DIR)
    update_json_path: Path = Path(UPDATE_JSON_FILE)
    marker_path: Path = Path(CURRENT_TAG_FILE)
    bin_dir: Path = Path(BIN_DIR_NAME)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the process environment.

    Parameters:
        environ (Optional[Mapping[str, str]]): Environment mapping to read; defaults to os.environ.

    Returns:
        Settings: repository and author fall back to their defaults when unset or empty;
        github_token is None when unset or blank.
    """
    env = os.environ if environ is None else environ
    token = env.get(TOKEN_ENV_VAR, "").strip() or None
    return Settings(
        repository=get_env_or_default(REPOSITORY_ENV_VAR, DEFAULT_REPOSITORY, env),
        author=get_env_or_default(ACTOR_ENV_VAR, DEFAULT_AUTHOR, env),
        github_token=token,
    )

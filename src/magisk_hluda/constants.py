"""
Constants and configuration values for magisk-hluda.

This module contains all hardcoded values, URLs, file names and other
constants used throughout the application.
"""

# GitHub API URLs
GITHUB_API_BASE = "https://api.github.com/repos"
GITHUB_WEB_BASE = "https://github.com"
FLORIDA_REPOSITORY = "Ylarod/Florida"
FLORIDA_DOWNLOAD_BASE = f"{GITHUB_WEB_BASE}/{FLORIDA_REPOSITORY}/releases/download"
GITHUB_API_VERSION = "2022-11-28"

# Network timeouts (in seconds)
GITHUB_API_TIMEOUT = 10
DOWNLOAD_TIMEOUT = 120
RATE_LIMIT_WARNING_THRESHOLD = 10

# Release selection
RELEASE_SCAN_COUNT = 10
SERVER_ASSET_MARKER = "florida-server-"

# Output files and directories (relative to the working directory)
CURRENT_TAG_FILE = "currentTag.txt"
MODULE_TEMPLATE_DIR = "module_template"
MODULE_PROP_FILE = "module.prop"
UPDATE_JSON_FILE = "update.json"
BIN_DIR_NAME = "bin"
OUTPUT_FILE_PREFIX = "florida-"
GZIP_EXTENSION = ".gz"

# Module descriptor
MODULE_ID = "magisk-hluda"
MODULE_NAME = "Frida(Florida) Server on Boot"
MODULE_DESCRIPTION = "Runs a stealthier frida-server on boot"
MODULE_AUTHOR_SUFFIX = " - Ylarod - Exo1i"
MODULE_ZIP_PREFIX = "Magisk-Florida-Universal-"
CHANGELOG_URL = (
    "https://gist.githubusercontent.com/znmn/d18d6bcbb4a8a0dbfe24e243c19b4195"
    "/raw/077a548931b8101c31722bc52b1a34b4bbf206c0/gistfile1.txt"
)

# Environment variable names and their defaults
REPOSITORY_ENV_VAR = "GITHUB_REPOSITORY"
ACTOR_ENV_VAR = "GITHUB_ACTOR"
TOKEN_ENV_VAR = "GITHUB_TOKEN"
LOG_LEVEL_ENV_VAR = "MAGISK_HLUDA_LOG_LEVEL"
DEFAULT_REPOSITORY = "znmn/magiskhluda"
DEFAULT_AUTHOR = "The Community"

# Logging configuration
LOGGER_NAME = "magisk_hluda"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
INFO_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s: %(message)s"

# Maximum number of response body characters kept on error messages
ERROR_BODY_PREVIEW_CHARS = 200

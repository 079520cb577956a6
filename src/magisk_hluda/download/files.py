"""
File Operations for the magisk-hluda download subsystem

Atomic text and binary writes used for the marker file, the rendered
metadata and the downloaded server binaries.
"""

import os
import tempfile
from pathlib import Path
from typing import IO, Any, Callable, Union

from magisk_hluda.exceptions import FileSystemError
from magisk_hluda.log_utils import logger

Pathish = Union[str, Path]

DEFAULT_FILE_MODE = 0o666


def _umask_file_mode() -> int:
    """
    Return the permission bits a plain `open()` would give a new file under the current umask.
    """
    umask = os.umask(0)
    os.umask(umask)
    return DEFAULT_FILE_MODE & ~umask


def _atomic_write(
    file_path: Pathish,
    writer_func: Callable[[IO[Any]], None],
    binary: bool = False,
    suffix: str = ".tmp",
) -> None:
    """
    Write data to a file atomically by writing to a temporary file and replacing the target on success.

    Parameters:
        file_path (Pathish): Destination file path to be written.
        writer_func (Callable[[IO[Any]], None]): Callable that receives the open temporary file and writes the content.
        binary (bool): Open the temporary file in binary mode instead of UTF-8 text mode.
        suffix (str): Suffix to use for the temporary file name.

    Raises:
        FileSystemError: If the temporary file cannot be created, written or moved into place.
    """
    target = str(file_path)
    try:
        temp_fd, temp_path = tempfile.mkstemp(
            dir=os.path.dirname(target) or ".", prefix="tmp-", suffix=suffix
        )
    except OSError as e:
        raise FileSystemError(
            f"Failed to open file for writing: {target}", path=target, details=str(e)
        ) from e

    try:
        if binary:
            with os.fdopen(temp_fd, "wb") as temp_f:
                writer_func(temp_f)
        else:
            with os.fdopen(temp_fd, "w", encoding="utf-8", newline="") as temp_f:
                writer_func(temp_f)
        # mkstemp creates 0600 files
        os.chmod(temp_path, _umask_file_mode())
        os.replace(temp_path, target)
    except (OSError, UnicodeEncodeError) as e:
        raise FileSystemError(
            f"Could not write to {target}", path=target, details=str(e)
        ) from e
    finally:
        if os.path.exists(temp_path):
            try:
                os.remove(temp_path)
            except OSError:
                logger.debug(f"Could not remove temporary file {temp_path}")


def write_text(file_path: Pathish, content: str) -> None:
    """
    Atomically replace `file_path` with `content`, written verbatim as UTF-8.
    """
    _atomic_write(file_path, lambda f: f.write(content), suffix=".txt")


def write_bytes(file_path: Pathish, payload: bytes) -> None:
    """
    Atomically replace `file_path` with the raw `payload` bytes.
    """
    _atomic_write(file_path, lambda f: f.write(payload), binary=True, suffix=".part")


def ensure_directory_exists(directory: Pathish) -> None:
    """
    Create `directory` and any missing parents.

    Raises:
        FileSystemError: If the directory cannot be created.
    """
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        raise FileSystemError(
            f"Could not create directory {directory}",
            path=str(directory),
            details=str(e),
        ) from e

from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path resolution, idempotent directory creation, guarded recursive
removal and the small helpers (emptiness check, marker writing) used by the
package generator. Acts as an abstraction over the 'os' and 'shutil'
modules so the domain layers never touch raw filesystem calls.
"""

import hashlib
import logging
import os
import shutil
import stat
import time
import uuid
from contextlib import suppress
from typing import List, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

DEFAULT_WORKSPACE_ROOT = "packages"
FILESYSTEM_ROOT = "/"
APP_DIR_NAME = "Packager"
UNIX_APP_DIR_NAME = ".packager"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/Packager
    - Linux/Mac: ~/.packager

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        try:
            home = os.path.expanduser("~")
            path = os.path.join(home, UNIX_APP_DIR_NAME)
        except Exception:
            path = os.path.abspath(UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def expand_path(path: str) -> str:
    """
    Expand environment variables ($VAR/%VAR%) and the user home shortcut (~/).

    The result is not made absolute, so a relative value stays comparable
    with the literal workspace root.
    """
    return os.path.expandvars(os.path.expanduser(path))


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.abspath(expand_path(p))


def sanitize_dir_path(path: str) -> str:
    """Append a trailing separator to a directory path when missing."""
    return path if path.endswith(("/", os.sep)) else path + "/"


def make_filename(cwd: Optional[str] = None) -> str:
    """
    Generate a unique temporary filename for a downloaded package archive.

    Args:
        cwd: Directory that will hold the archive. Defaults to os.getcwd().

    Returns:
        str: Absolute path in the form '<cwd>/package<md5>.zip'.
    """
    seed = f"{time.time()}{uuid.uuid4().hex}".encode("utf-8")
    digest = hashlib.md5(seed).hexdigest()
    return os.path.join(cwd or os.getcwd(), f"package{digest}.zip")

# -----------------------------------------------------------------------------
# DIRECTORY OPERATIONS API
# -----------------------------------------------------------------------------

def make_dir(path: str) -> bool:
    """
    Create a directory (and its parents) if it does not exist yet.

    Creating an existing directory is a no-op. OSError propagates.

    Returns:
        bool: True if the directory was created by this call.
    """
    if os.path.isdir(path):
        return False
    os.makedirs(path, exist_ok=True)
    logger.debug(f"Directory created: {path}")
    return True


def is_directory_empty(path: str) -> bool:
    """Return True when the directory holds no entries at all."""
    with os.scandir(path) as it:
        return next(it, None) is None


def write_marker(directory: str, marker_name: str) -> str:
    """
    Write a zero-byte marker file inside a directory.

    Returns:
        str: Path of the written marker.
    """
    marker_path = sanitize_dir_path(directory) + marker_name
    with open(marker_path, "w", encoding="utf-8"):
        pass
    return marker_path


def remove_dir(path: str, workspace_root: str = DEFAULT_WORKSPACE_ROOT) -> bool:
    """
    Recursively remove a directory tree.

    Refuses to operate on the workspace root or the filesystem root. The
    comparison is a literal equality on the given values and happens before
    any descent into the tree.

    Args:
        path: Directory to remove.
        workspace_root: Literal workspace root value to protect.

    Returns:
        bool: False if the guard refused the path, True once removed.
    """
    if path == workspace_root or path == FILESYSTEM_ROOT:
        logger.warning(f"Refused to remove protected path: '{path}'")
        return False

    for entry in sorted(os.listdir(path)):
        full = os.path.join(path, entry)
        if os.path.isdir(full) and not os.path.islink(full):
            remove_dir(full, workspace_root)
        else:
            if not os.path.islink(full):
                os.chmod(full, stat.S_IRWXU | stat.S_IRWXG | stat.S_IRWXO)
            os.unlink(full)

    os.rmdir(path)
    logger.debug(f"Directory removed: {path}")
    return True


def clean_up(file_path: str) -> None:
    """Remove a temporary file, tolerating one that is already gone."""
    with suppress(FileNotFoundError):
        os.chmod(file_path, stat.S_IRWXU | stat.S_IRWXG | stat.S_IRWXO)
        os.unlink(file_path)


def move_path(src: str, dest: str) -> None:
    """Rename a file or directory, across devices if needed."""
    shutil.move(src, dest)

# -----------------------------------------------------------------------------
# FILE OPERATIONS API
# -----------------------------------------------------------------------------

def read_text(path: str) -> str:
    """Read a UTF-8 text file."""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_text(path: str, content: str) -> None:
    """Write a UTF-8 text file, replacing any previous content."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def delete_files(paths: List[str]) -> List[str]:
    """
    Delete every existing file in the list.

    Returns:
        List[str]: Paths that were actually deleted.
    """
    deleted: List[str] = []
    for p in paths:
        if os.path.isfile(p):
            os.unlink(p)
            deleted.append(p)
    return deleted

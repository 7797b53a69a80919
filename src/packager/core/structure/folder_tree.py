from __future__ import annotations

"""
Folder Tree Builder.

Realizes a FolderSpec on disk and, in a separate later pass, drops a
zero-byte marker file into every described directory that is still empty
so version control keeps tracking it. Both passes share one depth-first
traversal, so they visit directories in the same order.
"""

import logging
import os
from typing import Iterator, List, Optional

from packager.domain.constants import DEFAULT_MARKER_NAME
from packager.domain.folder_spec import DEFAULT_FOLDERS, Branch, FolderSpec
from packager.infra.fs import is_directory_empty, make_dir, write_marker

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def create_folder_structure(root_path: str, spec: Optional[FolderSpec] = None) -> List[str]:
    """
    Create every directory described by the folder specification under root_path.

    The root itself must already exist. Existing directories are left as
    they are; any OSError aborts the call.

    Args:
        root_path: Existing base directory.
        spec: Folder specification. Defaults to DEFAULT_FOLDERS.

    Returns:
        List[str]: Resolved directory paths in visit order.
    """
    visited: List[str] = []
    created = 0
    for path in iter_folder_paths(root_path, _resolve_spec(spec)):
        if make_dir(path):
            created += 1
        visited.append(path)

    logger.info(f"Folder structure ready under {root_path} ({created} created, {len(visited)} total)")
    return visited


def fill_empty_directories_with_marker(
        root_path: str,
        spec: Optional[FolderSpec] = None,
        marker: str = DEFAULT_MARKER_NAME,
) -> List[str]:
    """
    Write a marker file into every described directory that is empty.

    Must run after all file generation is finished; a directory that
    already holds anything, a previous marker included, is skipped.

    Args:
        root_path: Base directory the structure was created under.
        spec: Folder specification. Defaults to DEFAULT_FOLDERS.
        marker: Marker file name.

    Returns:
        List[str]: Paths of the markers written.
    """
    written: List[str] = []
    for path in iter_folder_paths(root_path, _resolve_spec(spec)):
        if is_directory_empty(path):
            written.append(write_marker(path, marker))
            logger.debug(f"Marker added to empty directory: {path}")

    logger.info(f"Empty directory sweep finished: {len(written)} marker(s) written.")
    return written


def iter_folder_paths(root_path: str, spec: FolderSpec) -> Iterator[str]:
    """
    Yield every directory path described by spec, depth-first.

    A branch is yielded before its children; siblings keep their order.
    """
    for node in spec:
        path = join_segment(root_path, node.name)
        yield path
        if isinstance(node, Branch):
            yield from iter_folder_paths(path, node.children)


def join_segment(base: str, name: str) -> str:
    """Append one directory segment to an accumulated path."""
    return os.path.join(base, name)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _resolve_spec(spec: Optional[FolderSpec]) -> FolderSpec:
    return DEFAULT_FOLDERS if spec is None else spec

from __future__ import annotations

"""
Archive Extraction Infrastructure.

Thin wrapper over 'zipfile' used to unpack downloaded package skeletons.
"""

import logging
import os
import zipfile
from typing import List

logger = logging.getLogger(__name__)


def extract_archive(zip_path: str, directory: str) -> List[str]:
    """
    Extract every member of a zip archive into a directory.

    Args:
        zip_path: Archive to read.
        directory: Destination directory (created when missing).

    Returns:
        List[str]: Member names found in the archive.

    Raises:
        zipfile.BadZipFile: The file is not a readable zip archive.
    """
    os.makedirs(directory, exist_ok=True)
    with zipfile.ZipFile(zip_path, "r") as zf:
        names = zf.namelist()
        zf.extractall(directory)

    logger.info(f"Extracted {len(names)} archive entries into: {directory}")
    return names


def top_level_entries(names: List[str]) -> List[str]:
    """Return the distinct first path segments of archive member names, in order."""
    seen: List[str] = []
    for name in names:
        head = name.replace("\\", "/").split("/", 1)[0]
        if head and head not in seen:
            seen.append(head)
    return seen

from __future__ import annotations

"""
Package Finalization Stage.

Applies the manifest defaults, drops skeleton files the generated package
does not need and, as the very last step, sweeps the folder layout for
directories that are still empty.
"""

import logging
import os
from typing import Any, Dict, List

from packager.core.manifest.composer import update_composer_json
from packager.core.structure.folder_tree import fill_empty_directories_with_marker
from packager.domain.constants import UNNECESSARY_FILES
from packager.infra.fs import delete_files

logger = logging.getLogger(__name__)


def update_manifest(cfg: Dict[str, Any], ctx: Dict[str, Any]) -> bool:
    """Rewrite composer.json when the skeleton provides one."""
    manifest = os.path.join(ctx["package_path"], "composer.json")
    if not os.path.isfile(manifest):
        logger.warning(f"No composer.json in the skeleton, manifest step skipped: {manifest}")
        return False
    update_composer_json(manifest, ctx["namespace"], cfg.get("composer"))
    return True


def remove_unnecessary_files(path: str) -> List[str]:
    """
    Delete the skeleton's community and prefill files from the package root.

    Returns:
        List[str]: Files deleted.
    """
    deleted = delete_files([os.path.join(path, f) for f in UNNECESSARY_FILES])
    logger.debug(f"Removed {len(deleted)} unnecessary skeleton file(s).")
    return deleted


def sweep_empty_directories(cfg: Dict[str, Any], ctx: Dict[str, Any]) -> List[str]:
    """Mark the still-empty layout directories, unless markers are disabled."""
    if not cfg.get("create_markers", True):
        logger.debug("Marker files disabled by configuration.")
        return []
    return fill_empty_directories_with_marker(ctx["src_path"], ctx["spec"], cfg["marker_name"])

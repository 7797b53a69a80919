from __future__ import annotations

"""
Skeleton Acquisition Stage.

Downloads the skeleton archive, unpacks it into a scratch directory inside
the workspace and moves the skeleton folder to the package path. The
temporary archive and the scratch directory are always removed, so the
vendor directory only ever receives the finished package folder.
"""

import logging
import os
import tempfile
import zipfile
from typing import Any, Dict, Optional

from packager.domain.generation_models import GenerationResult, create_error_result
from packager.infra.archive import extract_archive, top_level_entries
from packager.infra.fs import clean_up, make_filename, move_path, remove_dir
from packager.infra.network import download_archive, resolve_verify_tls

logger = logging.getLogger(__name__)

SCRATCH_PREFIX = ".packager-extract-"


def fetch_skeleton(cfg: Dict[str, Any], ctx: Dict[str, Any]) -> Optional[GenerationResult]:
    """
    Place the skeleton contents at ctx['package_path'].

    Args:
        cfg: Validated configuration.
        ctx: Context built by prepare_environment.

    Returns:
        Optional[GenerationResult]: A failed result, or None on success.
    """
    vendor, name, package_path = ctx["vendor"], ctx["name"], ctx["package_path"]
    workspace = ctx["workspace"]
    zip_file = make_filename(workspace)
    scratch = tempfile.mkdtemp(prefix=SCRATCH_PREFIX, dir=workspace)
    verify = resolve_verify_tls(bool(cfg.get("verify_tls", True)))

    try:
        ok, msg = download_archive(cfg["skeleton_url"], zip_file, verify=verify)
        if not ok:
            return create_error_result(msg, vendor, name, package_path)

        try:
            names = extract_archive(zip_file, scratch)
        except zipfile.BadZipFile as e:
            msg = f"Skeleton archive is not a valid zip file: {e}"
            logger.error(msg)
            return create_error_result(msg, vendor, name, package_path)

        extracted = _locate_skeleton_dir(scratch, cfg["skeleton_dir_name"], names)
        if not extracted:
            msg = f"Skeleton folder '{cfg['skeleton_dir_name']}' not found in the archive."
            logger.error(msg)
            return create_error_result(msg, vendor, name, package_path)

        move_path(extracted, package_path)
    finally:
        clean_up(zip_file)
        remove_dir(scratch, workspace)

    logger.info(f"Skeleton unpacked to: {package_path}")
    return None


def _locate_skeleton_dir(extract_dir: str, dir_name: str, names: list) -> Optional[str]:
    """Prefer the configured folder name, else the archive's single top-level folder."""
    preferred = os.path.join(extract_dir, dir_name)
    if os.path.isdir(preferred):
        return preferred

    heads = top_level_entries(names)
    if len(heads) == 1:
        candidate = os.path.join(extract_dir, heads[0])
        if os.path.isdir(candidate):
            logger.debug(f"Using archive top-level folder '{heads[0]}' as skeleton.")
            return candidate
    return None

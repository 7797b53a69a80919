from __future__ import annotations

"""
Core generation pipeline.

Coordinates a complete package generation run:
1. Validates configuration and resolves paths (aborts if the package exists).
2. Downloads and unpacks the skeleton archive.
3. Replaces skeleton placeholders.
4. Creates the folder layout.
5. Renders templates and static files.
6. Updates the composer manifest and removes unneeded skeleton files.
7. Writes marker files into directories that stayed empty.

Also provides the guarded removal of a generated package.
"""

import logging
import os
from typing import Any, Callable, Dict, List, Optional

from packager.core.pipeline.stages.fetch import fetch_skeleton
from packager.core.pipeline.stages.finalize import (
    remove_unnecessary_files,
    sweep_empty_directories,
    update_manifest,
)
from packager.core.pipeline.stages.scaffold import (
    apply_skeleton_tokens,
    build_structure,
    render_package_files,
)
from packager.core.pipeline.stages.setup import prepare_environment, validate_segment
from packager.core.pipeline.stages.validator import validate_config
from packager.domain.generation_models import (
    GenerationResult,
    create_error_result,
    create_success_result,
)
from packager.infra.fs import expand_path, is_directory_empty, remove_dir

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]

GENERATION_STEPS: List[str] = [
    "setup",
    "fetch",
    "skeleton",
    "structure",
    "render",
    "manifest",
    "sweep",
]


def run_generation(
        config: Optional[Dict[str, Any]],
        vendor: str,
        name: str,
        *,
        progress_callback: Optional[ProgressCallback] = None,
) -> GenerationResult:
    """
    Generate a new package under the workspace root.

    Expected failures (existing package, download or archive problems) come
    back as a failed result. Filesystem errors after the skeleton is in
    place propagate to the caller.

    Args:
        config: Configuration dictionary (raw or partial).
        vendor: Vendor directory name.
        name: Package directory name.
        progress_callback: Receives (current_step, total_steps, label).

    Returns:
        GenerationResult: Status, produced paths and summary.
    """
    logger.info(f"Package generation started: {vendor}/{name}")
    total = len(GENERATION_STEPS)

    def advance(step: str) -> None:
        current = GENERATION_STEPS.index(step) + 1
        logger.debug(f"Step {current}/{total}: {step}")
        if progress_callback:
            progress_callback(current, total, step)

    # 1) Config & Environment
    cfg, warnings = validate_config(config or {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    advance("setup")
    error, ctx = prepare_environment(cfg, vendor, name)
    if error:
        return error

    # 2) Skeleton
    advance("fetch")
    error = fetch_skeleton(cfg, ctx)
    if error:
        return error

    advance("skeleton")
    personalized = apply_skeleton_tokens(ctx, cfg["composer"])

    # 3) Layout & Files
    advance("structure")
    created_dirs = build_structure(ctx)

    advance("render")
    generated_files = render_package_files(ctx, cfg["marker_name"], cfg["create_markers"])

    # 4) Manifest & Cleanup
    advance("manifest")
    manifest_updated = update_manifest(cfg, ctx)
    removed = remove_unnecessary_files(ctx["package_path"])

    # 5) Empty directory sweep (always last)
    advance("sweep")
    markers = sweep_empty_directories(cfg, ctx)

    summary = {
        "package_path": ctx["package_path"],
        "namespace": ctx["namespace"],
        "skeleton_url": cfg["skeleton_url"],
        "personalized_files": personalized,
        "manifest_updated": manifest_updated,
        "removed_files": removed,
        "directories": len(created_dirs),
        "files": len(generated_files),
        "markers": len(markers),
    }

    logger.info(f"Package generated successfully: {ctx['package_path']}")
    return create_success_result(
        ctx["vendor"], ctx["name"], ctx["package_path"],
        created_dirs, generated_files, markers, summary
    )


def run_removal(config: Optional[Dict[str, Any]], vendor: str, name: str) -> GenerationResult:
    """
    Remove a generated package, then its vendor directory if left empty.

    Paths are built from the configured workspace root with only ~ and
    environment variables expanded, the same value the removal guard
    protects.

    Returns:
        GenerationResult: Status of the removal.
    """
    cfg, warnings = validate_config(config or {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    vendor = (vendor or "").strip()
    name = (name or "").strip()
    for value, label in ((vendor, "vendor"), (name, "package name")):
        err = validate_segment(value, label)
        if err:
            logger.error(err)
            return create_error_result(err, vendor, name)

    workspace = expand_path(cfg["workspace_root"])
    vendor_path = os.path.join(workspace, vendor)
    package_path = os.path.join(vendor_path, name)

    if not os.path.isdir(package_path):
        msg = f"Package not found: {package_path}"
        logger.error(msg)
        return create_error_result(msg, vendor, name, package_path)

    if not remove_dir(package_path, workspace):
        return create_error_result("Refused to remove protected path", vendor, name, package_path)

    vendor_removed = False
    if is_directory_empty(vendor_path):
        vendor_removed = remove_dir(vendor_path, workspace)

    logger.info(f"Package removed: {package_path}")
    return create_success_result(
        vendor, name, package_path,
        summary_extra={"removed": True, "vendor_removed": vendor_removed}
    )

from __future__ import annotations

"""
Generation Setup Stage.

Resolves names, namespaces and paths for one run and enforces the
pre-condition that the target package does not exist yet. Nothing is
written to disk before that check passes.
"""

import logging
import os
import re
from typing import Any, Dict, Optional, Tuple

from packager.core.templating.renderer import convert_package_name_to_service_name
from packager.domain.constants import PACKAGE_SOURCE_DIR
from packager.domain.folder_spec import DEFAULT_FOLDERS, parse_folder_spec
from packager.domain.generation_models import GenerationResult, create_error_result
from packager.infra.fs import make_dir, normalize_path

logger = logging.getLogger(__name__)

_WORD_SPLIT_RX = re.compile(r"[-_\s]+")


# ==============================================================================
# PUBLIC HELPERS
# ==============================================================================

def check_existing_package(path: str, vendor: str, name: str) -> None:
    """
    Abort when the package directory already exists.

    Raises:
        RuntimeError: '<path>/<vendor>/<name>' is an existing directory.
    """
    if os.path.isdir(os.path.join(path, vendor, name)):
        raise RuntimeError("Package already exists")


def studly_case(value: str) -> str:
    """'my-package_name' -> 'MyPackageName'."""
    return "".join(w[:1].upper() + w[1:] for w in _WORD_SPLIT_RX.split(value) if w)


def validate_segment(value: str, label: str) -> Optional[str]:
    """Return an error message when value is not a usable directory segment."""
    v = (value or "").strip()
    if not v or v in (".", ".."):
        return f"Invalid {label}: '{value}'."
    if "/" in v or "\\" in v:
        return f"Invalid {label}: '{value}' must not contain path separators."
    return None


def build_tokens(package: str, namespace: str) -> Dict[str, str]:
    """Full token context shared by every bundled template."""
    return {
        ":package_name:": package,
        ":controller_namespace:": namespace + "\\Controllers",
        ":controllers_namespace:": namespace + "\\Controllers",
        ":facade_namespace:": namespace + "\\Facades",
        ":repository_namespace:": namespace + "\\Repositories",
        ":service_provider_namespace:": namespace,
        ":service_name:": convert_package_name_to_service_name(package),
        ":config_file:": package.lower(),
        ":namespace:": namespace,
        ":class_name:": package,
    }


# ==============================================================================
# ENVIRONMENT PREPARATION LOGIC
# ==============================================================================

def prepare_environment(
        cfg: Dict[str, Any],
        vendor: str,
        name: str
) -> Tuple[Optional[GenerationResult], Dict[str, Any]]:
    """
    Build the run context for a new package.

    Args:
        cfg: Validated configuration.
        vendor: Vendor directory name.
        name: Package directory name.

    Returns:
        Tuple[Optional[GenerationResult], Dict[str, Any]]:
            A failed result and an empty context when a pre-condition fails,
            otherwise None and the context.
    """
    vendor = (vendor or "").strip()
    name = (name or "").strip()

    for value, label in ((vendor, "vendor"), (name, "package name")):
        err = validate_segment(value, label)
        if err:
            logger.error(err)
            return create_error_result(err, vendor, name), {}

    workspace = normalize_path(cfg.get("workspace_root"), os.getcwd())
    vendor_path = os.path.join(workspace, vendor)
    package_path = os.path.join(vendor_path, name)

    try:
        check_existing_package(workspace, vendor, name)
    except RuntimeError as e:
        msg = f"{e}: {package_path}"
        logger.error(msg)
        return create_error_result(msg, vendor, name, package_path), {}

    folders = cfg.get("folders")
    spec = DEFAULT_FOLDERS if folders is None else parse_folder_spec(folders)

    make_dir(workspace)
    make_dir(vendor_path)

    studly_vendor = studly_case(vendor)
    studly_name = studly_case(name)
    namespace = f"{studly_vendor}\\{studly_name}"

    env_context = {
        "workspace": workspace,
        "vendor": vendor,
        "name": name,
        "vendor_path": vendor_path,
        "package_path": package_path,
        "src_path": os.path.join(package_path, PACKAGE_SOURCE_DIR),
        "studly_vendor": studly_vendor,
        "studly_name": studly_name,
        "namespace": namespace,
        "spec": spec,
        "tokens": build_tokens(studly_name, namespace),
    }

    logger.info(f"Generation context ready for {vendor}/{name} (namespace {namespace}).")
    return None, env_context

from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between raw configuration sources (persisted file, CLI
overrides, embedding callers) and the generation engine. Coerces types,
fills missing keys with defaults and checks the folder specification.
"""

import logging
from typing import Any, Dict, List, Tuple

from packager.domain.config import get_default_config
from packager.domain.folder_spec import parse_folder_spec

logger = logging.getLogger(__name__)

STRING_FIELDS = ["workspace_root", "skeleton_url", "skeleton_dir_name", "marker_name"]
BOOL_FIELDS = ["verify_tls", "create_markers"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise on invalid values instead of falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["marker_name"] = _as_file_name(
        merged["marker_name"], defaults["marker_name"], warnings, strict
    )
    merged["folders"] = _as_folders(merged.get("folders"), warnings, strict)
    merged["composer"] = _as_composer(merged.get("composer"), defaults["composer"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce numbers and human-friendly strings into booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _as_file_name(value: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Reject marker names that are not a single file name."""
    if "/" in value or "\\" in value or value in (".", ".."):
        msg = f"Invalid field 'marker_name': '{value}' is not a plain file name."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback
    return value


def _as_folders(value: Any, warnings: List[str], strict: bool) -> Any:
    """Keep the JSON form of the folder specification if it parses, else None."""
    if value is None:
        return None
    try:
        parse_folder_spec(value)
    except ValueError as e:
        if strict:
            raise
        warnings.append(f"Invalid field 'folders': {e} Using the default layout.")
        return None
    return value


def _as_composer(
        value: Any,
        fallback: Dict[str, Any],
        warnings: List[str],
        strict: bool
) -> Dict[str, Any]:
    """Merge manifest overrides over the defaults."""
    if value is None:
        return dict(fallback)
    if not isinstance(value, dict):
        msg = f"Invalid field 'composer': expected dict, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return dict(fallback)
    out = dict(fallback)
    out.update(value)
    return out

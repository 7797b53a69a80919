from __future__ import annotations

"""
Configuration Domain Management.

Handles the persisted generator settings (JSON file in the user data
directory) and the built-in defaults every run starts from.
"""

import copy
import json
import logging
import os
from typing import Any, Dict

from packager.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_COMPOSER,
    DEFAULT_MARKER_NAME,
    DEFAULT_SKELETON_DIR_NAME,
    DEFAULT_SKELETON_URL,
)
from packager.infra.fs import DEFAULT_WORKSPACE_ROOT, get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def get_config_file() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    'folders' set to None selects the built-in folder specification.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Workspace
        "workspace_root": DEFAULT_WORKSPACE_ROOT,

        # Skeleton source
        "skeleton_url": DEFAULT_SKELETON_URL,
        "skeleton_dir_name": DEFAULT_SKELETON_DIR_NAME,
        "verify_tls": True,

        # Folder layout
        "folders": None,
        "create_markers": True,
        "marker_name": DEFAULT_MARKER_NAME,

        # Manifest
        "composer": copy.deepcopy(DEFAULT_COMPOSER),
    }


def get_default_app_state() -> Dict[str, Any]:
    """Full JSON structure stored in config.json."""
    return {
        "version": CURRENT_CONFIG_VERSION,
        "settings": get_default_config(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load the persisted state, falling back to defaults on any problem.

    Returns:
        Dict[str, Any]: The loaded state or the default structure.
    """
    default_state = get_default_app_state()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return default_state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return default_state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return default_state

    settings = data.get("settings")
    if isinstance(settings, dict):
        default_state["settings"].update(settings)

    default_state["version"] = CURRENT_CONFIG_VERSION
    return default_state


def save_app_state(state: Dict[str, Any]) -> bool:
    """
    Persist the state dictionary to disk.

    Returns:
        bool: True when the file was written.
    """
    config_file = get_config_file()
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """Return the persisted settings merged over the defaults."""
    defaults = get_default_config()
    defaults.update(load_app_state().get("settings", {}))
    return defaults


def save_config(config: Dict[str, Any]) -> bool:
    """Persist the provided settings."""
    state = load_app_state()
    state["settings"] = config
    return save_app_state(state)

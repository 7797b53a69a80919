from __future__ import annotations

"""
Composer Manifest Editor.

Loads the package composer.json shipped by the skeleton, applies the
generator defaults field by field and writes it back pretty-printed.
"""

import copy
import json
import logging
from typing import Any, Dict, Mapping, Optional

from packager.domain.constants import DEFAULT_COMPOSER, PACKAGE_TESTS_DIR
from packager.infra.fs import read_text, write_text

logger = logging.getLogger(__name__)

MANIFEST_FIELDS = ("description", "license", "authors", "require-dev", "require", "homepage")


def update_composer_json(
        path_to_file: str,
        namespace: str,
        settings: Optional[Mapping[str, Any]] = None
) -> Dict[str, Any]:
    """
    Rewrite a composer.json with the configured package metadata.

    Sets description, license, authors, require, require-dev and homepage,
    and maps '<namespace>\\Tests\\' to the tests directory under
    autoload-dev.psr-4. Other keys are preserved.

    Args:
        path_to_file: composer.json location.
        namespace: Root PHP namespace of the package.
        settings: Overrides for the manifest defaults.

    Returns:
        Dict[str, Any]: The manifest as written.

    Raises:
        ValueError: The file is not a JSON object.
    """
    values = copy.deepcopy(DEFAULT_COMPOSER)
    if settings:
        values.update(copy.deepcopy(dict(settings)))

    manifest = json.loads(read_text(path_to_file))
    if not isinstance(manifest, dict):
        raise ValueError(f"Manifest at '{path_to_file}' is not a JSON object.")

    for key in MANIFEST_FIELDS:
        if key in values:
            manifest[key] = values[key]

    autoload_dev = manifest.get("autoload-dev")
    if not isinstance(autoload_dev, dict):
        autoload_dev = {}
    autoload_dev["psr-4"] = {namespace + "\\Tests\\": PACKAGE_TESTS_DIR}
    manifest["autoload-dev"] = autoload_dev

    write_text(path_to_file, json.dumps(manifest, ensure_ascii=False, indent=4) + "\n")
    logger.info(f"Composer manifest updated: {path_to_file}")
    return manifest

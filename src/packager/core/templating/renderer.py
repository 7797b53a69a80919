from __future__ import annotations

"""
Template Rendering Service.

One generic operation replaces the per-file "create X from template"
helpers: read a text source, substitute every token of a mapping and
write the result. Bundled templates and static files live next to this
module.
"""

import logging
import os
import re
import shutil
from typing import Mapping, Optional

from packager.infra.fs import read_text, write_text

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")
FILES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "files")

_UPPER_RUN_RX = re.compile(r"[A-Z]([A-Z](?![a-z]))*")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def replace_tokens(text: str, tokens: Mapping[str, str]) -> str:
    """Replace each token key by its value, applied in mapping order."""
    for search, replace in tokens.items():
        text = text.replace(search, replace)
    return text


def replace_and_save(
        old_file: str,
        tokens: Mapping[str, str],
        new_file: Optional[str] = None
) -> str:
    """
    Open a file, substitute the tokens and save it.

    Args:
        old_file: Source file.
        tokens: Token to replacement mapping.
        new_file: Destination. Defaults to old_file (in-place).

    Returns:
        str: Path written.
    """
    target = new_file or old_file
    write_text(target, replace_tokens(read_text(old_file), tokens))
    return target


def render_template(template_name: str, tokens: Mapping[str, str], output_path: str) -> str:
    """
    Render a bundled template into output_path.

    The destination directory must exist.

    Returns:
        str: Path written.
    """
    source = os.path.join(TEMPLATES_DIR, template_name)
    replace_and_save(source, tokens, output_path)
    logger.debug(f"Rendered {template_name} -> {output_path}")
    return output_path


def copy_static_file(file_name: str, dest_dir: str) -> str:
    """
    Copy a bundled static file into dest_dir, keeping its name.

    Returns:
        str: Path of the copy.
    """
    dest = os.path.join(dest_dir, file_name)
    shutil.copyfile(os.path.join(FILES_DIR, file_name), dest)
    logger.debug(f"Copied {file_name} -> {dest}")
    return dest


def convert_package_name_to_service_name(package_name: str) -> str:
    """
    Convert a StudlyCase package name into a dotted service name.

    Examples:
        'MyPackage' -> 'my.package'
        'HTTPClient' -> 'http.client'
    """
    dotted = _UPPER_RUN_RX.sub(lambda m: "." + m.group(0), package_name)
    return dotted.lower().lstrip(".")

from __future__ import annotations

"""
Package Scaffolding Stage.

Personalizes the skeleton files, creates the folder layout and renders
the bundled templates into the new package.
"""

import logging
import os
from typing import Any, Dict, List

from packager.core.structure.folder_tree import create_folder_structure
from packager.core.templating.renderer import (
    copy_static_file,
    render_template,
    replace_and_save,
)
from packager.domain.constants import (
    SKELETON_CLASS_FILE,
    SKELETON_CLASS_TEMPLATE,
    SKELETON_TOKEN_FILES,
    STATIC_FILES,
    TEMPLATE_TARGETS,
    VIEWS_INDEX_FILE,
)
from packager.infra.fs import make_dir, move_path, write_marker, write_text

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# SKELETON PERSONALIZATION
# -----------------------------------------------------------------------------

def skeleton_tokens(ctx: Dict[str, Any], composer: Dict[str, Any]) -> Dict[str, str]:
    """
    Placeholder mapping for the files shipped by the skeleton.

    Longer tokens come first so ':vendor/:package_name' is replaced before
    its ':vendor' prefix.
    """
    vendor, name = ctx["vendor"], ctx["name"]
    sv, sn = ctx["studly_vendor"], ctx["studly_name"]
    authors = composer.get("authors") or [{}]
    author = authors[0] if isinstance(authors, list) and authors else {}

    return {
        ":vendor\\\\:package_name\\\\": f"{sv}\\\\{sn}\\\\",
        "League\\\\Skeleton\\\\": f"{sv}\\\\{sn}\\\\",
        "League\\Skeleton": f"{sv}\\{sn}",
        ":vendor/:package_name": f"{vendor}/{name}",
        "league/:package_name": f"{vendor}/{name}",
        ":author_name": str(author.get("name", "")),
        ":author_email": str(author.get("email", "")),
        ":author_website": str(author.get("homepage", "")),
        ":author_username": vendor,
        ":package_description": str(composer.get("description", "")),
        ":vendor": vendor,
        ":package_name": name,
    }


def apply_skeleton_tokens(ctx: Dict[str, Any], composer: Dict[str, Any]) -> List[str]:
    """
    Replace skeleton placeholders in place.

    Returns:
        List[str]: Files rewritten (files absent from the skeleton are skipped).
    """
    tokens = skeleton_tokens(ctx, composer)
    touched: List[str] = []
    for rel in SKELETON_TOKEN_FILES:
        path = os.path.join(ctx["package_path"], rel)
        if os.path.isfile(path):
            touched.append(replace_and_save(path, tokens))
    logger.debug(f"Skeleton placeholders replaced in {len(touched)} file(s).")
    return touched


# -----------------------------------------------------------------------------
# STRUCTURE & TEMPLATES
# -----------------------------------------------------------------------------

def build_structure(ctx: Dict[str, Any]) -> List[str]:
    """Create the source directory and its folder layout."""
    make_dir(ctx["src_path"])
    return create_folder_structure(ctx["src_path"], ctx["spec"])


def render_package_files(
        ctx: Dict[str, Any],
        marker_name: str,
        create_markers: bool = True
) -> List[str]:
    """
    Render every bundled template and copy the static files.

    The config and migrations markers are written only when create_markers
    is set.

    Returns:
        List[str]: Files written, in order.
    """
    written: List[str] = []
    tokens = ctx["tokens"]
    placeholders = {
        "package": ctx["studly_name"],
        "config_file": tokens[":config_file:"],
    }

    for target in TEMPLATE_TARGETS:
        base = ctx["src_path"] if target["base"] == "src" else ctx["package_path"]
        output = os.path.join(base, target["output"].format(**placeholders))
        make_dir(os.path.dirname(output))
        selected = {k: tokens[k] for k in target["tokens"]}
        written.append(render_template(target["template"], selected, output))

    # The config directory keeps a marker next to its config file
    if create_markers:
        config_dir = os.path.join(ctx["src_path"], "config")
        written.append(write_marker(config_dir, marker_name))

    written.append(_replace_skeleton_class(ctx))

    index_path = os.path.join(ctx["src_path"], VIEWS_INDEX_FILE)
    make_dir(os.path.dirname(index_path))
    write_text(index_path, "")
    written.append(index_path)

    for file_name in STATIC_FILES:
        written.append(copy_static_file(file_name, ctx["package_path"]))

    migrations = os.path.join(ctx["src_path"], "database", "migrations")
    if create_markers and os.path.isdir(migrations):
        written.append(write_marker(migrations, marker_name))

    logger.info(f"Rendered {len(written)} package file(s).")
    return written


def _replace_skeleton_class(ctx: Dict[str, Any]) -> str:
    """Overwrite SkeletonClass.php with the package class and rename it."""
    skeleton_path = os.path.join(ctx["src_path"], SKELETON_CLASS_FILE)
    tokens = {":namespace:": ctx["namespace"], ":class_name:": ctx["studly_name"]}
    render_template(SKELETON_CLASS_TEMPLATE, tokens, skeleton_path)

    final_path = os.path.join(ctx["src_path"], f"{ctx['studly_name']}.php")
    move_path(skeleton_path, final_path)
    return final_path

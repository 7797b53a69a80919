from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (sub-commands, options, help texts) and
translates parsed arguments into configuration overrides.
"""

import argparse
from typing import Any, Dict

from packager.utils.i18n import i18n

SUPPORTED_LOCALES = ["en", "es"]

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the packager CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="packager",
        description=i18n.t("app.description"),
    )

    # --- Workspace & Source ---
    p.add_argument(
        "-w", "--workspace",
        dest="workspace_root",
        default=None,
        help=i18n.t("cli.args.workspace"),
    )
    p.add_argument(
        "--skeleton-url",
        dest="skeleton_url",
        default=None,
        help=i18n.t("cli.args.skeleton_url"),
    )
    p.add_argument(
        "--insecure",
        action="store_true",
        help=i18n.t("cli.args.insecure"),
    )

    # --- Layout ---
    p.add_argument(
        "--folders",
        dest="folders",
        default=None,
        help=i18n.t("cli.args.folders"),
    )
    p.add_argument(
        "--no-markers",
        action="store_true",
        help=i18n.t("cli.args.no_markers"),
    )

    # --- Configuration and Diagnostics ---
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    p.add_argument("--save-config", action="store_true", help=i18n.t("cli.args.save"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument("--log", dest="log", action="store_true", help=i18n.t("cli.args.log"))
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--lang",
        dest="lang",
        choices=SUPPORTED_LOCALES,
        default=None,
        help=i18n.t("cli.args.lang"),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    # --- Commands ---
    sub = p.add_subparsers(dest="command")

    new_cmd = sub.add_parser("new", help=i18n.t("cli.args.new"))
    new_cmd.add_argument("vendor", help=i18n.t("cli.args.vendor"))
    new_cmd.add_argument("name", help=i18n.t("cli.args.name"))

    remove_cmd = sub.add_parser("remove", help=i18n.t("cli.args.remove"))
    remove_cmd.add_argument("vendor", help=i18n.t("cli.args.vendor"))
    remove_cmd.add_argument("name", help=i18n.t("cli.args.name"))

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    The folder layout stays in its JSON text form; validation parses it.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["workspace_root"] = args.workspace_root
    overrides["skeleton_url"] = args.skeleton_url
    overrides["folders"] = args.folders

    if args.insecure:
        overrides["verify_tls"] = False
    if args.no_markers:
        overrides["create_markers"] = False

    return overrides

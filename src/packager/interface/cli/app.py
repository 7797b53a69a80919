from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution (defaults, persisted file, CLI overrides), command dispatch to
the generation engine and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from packager.core.pipeline.engine import run_generation, run_removal
from packager.core.pipeline.stages.validator import validate_config
from packager.domain.config import get_config_file, get_default_config, load_config, save_config
from packager.domain.folder_spec import folder_spec_to_data, parse_folder_spec
from packager.domain.generation_models import GenerationResult
from packager.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from packager.interface.cli import args as cli_args
from packager.utils.i18n import i18n

logger = get_logger(__name__)

BAR_WIDTH = 28

CONFIG_KEYS = [
    "workspace_root", "skeleton_url", "skeleton_dir_name", "verify_tls",
    "folders", "create_markers", "marker_name", "composer",
]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 usage error, 130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.lang:
        i18n.load_locale(args.lang)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=_resolve_log_file(args)))

    logger.debug("CLI execution initiated. Resolving configuration...")

    base_conf = get_default_config() if args.use_defaults else load_config()
    overrides = cli_args.args_to_overrides(args)

    if overrides.get("folders") is not None:
        try:
            overrides["folders"] = folder_spec_to_data(parse_folder_spec(overrides["folders"]))
        except ValueError as e:
            print(f"ERROR: {i18n.t('cli.errors.invalid_folders', error=str(e))}", file=sys.stderr)
            return 2

    clean_conf, warnings = validate_config(_merge_config(base_conf, overrides), strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        if save_config(clean_conf):
            print(i18n.t("cli.status.saved", path=get_config_file()))

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.command is None:
        if args.save_config:
            return 0
        print(f"ERROR: {i18n.t('cli.errors.no_command')}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 2

    try:
        if args.command == "new":
            progress = None if args.json_output else _print_progress
            result = run_generation(
                clean_conf, args.vendor, args.name, progress_callback=progress
            )
        else:
            result = run_removal(clean_conf, args.vendor, args.name)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130
    except Exception as e:
        msg = i18n.t("cli.errors.generation_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, args.command)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# LOGGING TARGET
# -----------------------------------------------------------------------------

def _resolve_log_file(args: Any) -> Optional[str]:
    """Explicit --log-file wins; --log selects the standard log location."""
    if args.log_file:
        return args.log_file
    if args.log:
        return get_default_log_path()
    return None

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of known, non-None override keys into the base config."""
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _render_bar(current: int, total: int, label: str = "") -> str:
    """Format ' current/max [===>---] pct% label'."""
    total = max(total, 1)
    filled = int(BAR_WIDTH * current / total)
    if filled >= BAR_WIDTH:
        bar = "=" * BAR_WIDTH
    else:
        bar = "=" * filled + ">" + "-" * (BAR_WIDTH - filled - 1)
    percent = int(100 * current / total)
    line = f" {current}/{total} [{bar}] {percent:3d}%"
    return f"{line} {label}" if label else line


def _print_progress(current: int, total: int, label: str) -> None:
    print(_render_bar(current, total, label), flush=True)


def _print_human_summary(result: GenerationResult, command: str) -> None:
    """Print the result of a run for a terminal user."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if command == "remove":
        print(i18n.t("cli.status.removed", path=result.package_path))
        return

    print(i18n.t("cli.status.generated", path=result.package_path))
    print(i18n.t("cli.status.directories", count=len(result.created_dirs)))
    print(i18n.t("cli.status.files", count=len(result.generated_files)))
    print(i18n.t("cli.status.markers", count=len(result.markers)))


if __name__ == "__main__":
    sys.exit(main())

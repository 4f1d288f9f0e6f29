from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Runs the generator over a build output directory on disk: loads the options
(JSON file + command line overrides), loads the artifacts, executes the
pipeline and writes the new entries back into the directory.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from wbmetajson.core.pipeline.engine import run_pipeline
from wbmetajson.core.pipeline.validator import config_to_options, validate_config
from wbmetajson.core.services.readme import readme_output_name
from wbmetajson.domain.asset_models import Compilation
from wbmetajson.domain.config import load_config_file
from wbmetajson.domain.errors import ConfigurationError
from wbmetajson.domain.pipeline_models import GenerationResult
from wbmetajson.infra.fs import load_assets_from_dir, normalize_path, write_assets_to_dir
from wbmetajson.infra.logging import LoggingConfig, configure_logging, get_logger
from wbmetajson.interface.cli import args as cli_args
from wbmetajson.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 on success, 1 on generation failure, 2 on invalid input,
             130 when interrupted.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.locale and args.locale != i18n.locale:
        i18n.load_locale(args.locale)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 1. Paths
    input_path = normalize_path(args.input_path, os.getcwd())
    context = normalize_path(args.context_path, os.path.dirname(input_path))

    # 2. Options (file, then command line overrides)
    try:
        raw_options: Dict[str, Any] = load_config_file(args.config_file) if args.config_file else {}
        raw_options.update(cli_args.args_to_overrides(args))
        if "outputDir" not in raw_options and "output_dir" not in raw_options:
            raw_options["outputDir"] = os.path.relpath(input_path, context)
        cfg, _ = validate_config(raw_options, strict=True)
    except ConfigurationError as e:
        msg = i18n.t("cli.errors.config", error=str(e))
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    if args.dump_config:
        print(json.dumps(config_to_options(cfg), ensure_ascii=False, indent=2))
        return 0

    if not os.path.isdir(input_path):
        msg = i18n.t("cli.errors.path_not_exist", path=input_path)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 3. Generation
    try:
        # A README copied by a previous run is output, not input
        previous_output = [readme_output_name(cfg.readme_file)] if cfg.readme_file else []
        compilation = Compilation(
            context=context,
            assets=load_assets_from_dir(input_path, exclude=previous_output),
        )
        before = dict(compilation.assets)
        result = run_pipeline(cfg, compilation, dry_run=bool(args.dry_run))

        if result.ok and not args.dry_run:
            added = [
                (path, asset)
                for path, asset in compilation.assets.items()
                if before.get(path) is not asset
            ]
            write_assets_to_dir(input_path, added)
            logger.debug(f"{len(added)} entries written to {input_path}")
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130
    except OSError as e:
        msg = i18n.t("cli.errors.write_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 4. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, input_path)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: GenerationResult, output_path: str) -> None:
    """Print the execution result as a short terminal report."""
    if not result.ok:
        print(f"ERROR: {i18n.t('cli.errors.generation_fail', error=result.error)}", file=sys.stderr)
        return

    summary = result.summary
    if summary.get("dry_run"):
        print(i18n.t("cli.status.dry_run"))
    else:
        print(i18n.t("cli.status.success"))
        print(i18n.t("cli.status.output_dir", path=output_path))

    print(i18n.t("cli.status.documents", count=summary.get("directories", 0)))
    print(i18n.t("cli.status.files", count=summary.get("files", 0)))
    print(i18n.t("cli.status.skipped", count=summary.get("skipped", 0)))
    print(i18n.t("cli.status.icons", count=summary.get("icons", 0)))
    if result.readme_path:
        print(i18n.t("cli.status.readme", path=result.readme_path))


if __name__ == "__main__":
    sys.exit(main())

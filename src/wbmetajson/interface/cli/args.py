from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command line schema and translates the parsed namespace into
generator option overrides (camelCase keys, as accepted by the validator).
"""

import argparse
from typing import Any, Dict

from wbmetajson.domain.constants import ALLOWED_ENVIRONMENTS
from wbmetajson.utils.i18n import SUPPORTED_LOCALES, i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser of the wbmetajson CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="wbmetajson",
        description=i18n.t("app.description"),
    )

    # --- Paths ---
    p.add_argument("-i", "--input", dest="input_path", required=True, help=i18n.t("cli.args.input"))
    p.add_argument("-c", "--config", dest="config_file", default=None, help=i18n.t("cli.args.config"))
    p.add_argument("--context", dest="context_path", default=None, help=i18n.t("cli.args.context"))

    # --- Package options ---
    p.add_argument("--package", dest="package", default=None, help=i18n.t("cli.args.package"))
    p.add_argument("--description", dest="package_description", default=None, help=i18n.t("cli.args.description"))
    p.add_argument("--icon", dest="package_icon", default=None, help=i18n.t("cli.args.icon"))
    p.add_argument(
        "--environment",
        dest="environment",
        choices=ALLOWED_ENVIRONMENTS,
        default=None,
        help=i18n.t("cli.args.environment"),
    )
    p.add_argument("--readme", dest="readme_file", default=None, help=i18n.t("cli.args.readme"))

    # --- Execution ---
    p.add_argument("--dry-run", action="store_true", help=i18n.t("cli.args.dry_run"))
    p.add_argument("--json", dest="json_output", action="store_true", help=i18n.t("cli.args.json"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))

    # --- Diagnostics ---
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument("--log-file", dest="log_file", default=None, help=i18n.t("cli.args.log_file"))
    p.add_argument("--locale", dest="locale", choices=SUPPORTED_LOCALES, default=None, help=i18n.t("cli.args.locale"))

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the parsed namespace into option overrides.

    Only options given on the command line are present in the result.
    """
    mapping = {
        "package": args.package,
        "packageDescription": args.package_description,
        "packageIcon": args.package_icon,
        "environment": args.environment,
        "readmeFile": args.readme_file,
    }
    return {key: value for key, value in mapping.items() if value is not None}

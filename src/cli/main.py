"""CLI entry point for the help center."""

import argparse
import logging
import sys

from src import __version__
from src.lib.config import get_settings
from src.lib.exceptions import ConfigError, RegistryError
from src.lib.messages import available_languages
from src.models.request import (
    PARAM_IDENTIFIER,
    PARAM_MODULE,
    PARAM_SCOPE,
    PARAM_VARIABLE_PREFIX,
)
from src.services.help import create_help_page_service

logger = logging.getLogger(__name__)


# Exit codes per CLI contract
EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_NOT_FOUND = 3
EXIT_SOURCE_UNAVAILABLE = 4
EXIT_INTERNAL_ERROR = 5


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="lam-help",
        description="Render LDAP Account Manager help pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lam-help 201
  lam-help 201 --var uid --var 42
  lam-help 404 --module posixAccount --scope user
        """,
    )

    parser.add_argument(
        "help_number",
        nargs="?",
        default=None,
        help="Help identifier (HelpNumber)",
    )

    parser.add_argument(
        "-m", "--module",
        type=str,
        default=None,
        help="Module whose help registry is used (default: main)",
    )

    parser.add_argument(
        "-s", "--scope",
        type=str,
        default=None,
        help="Scope within the module (e.g. user, group)",
    )

    parser.add_argument(
        "--var",
        dest="variables",
        action="append",
        default=[],
        metavar="VALUE",
        help="Substitution value, repeat in placeholder order",
    )

    parser.add_argument(
        "-l", "--language",
        type=str,
        default=None,
        choices=available_languages(),
        help="Language of labels and messages (default: en)",
    )

    parser.add_argument(
        "-r", "--registry",
        type=str,
        default=None,
        help="Global help registry file (default: ./help/help.json)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging on stderr",
    )

    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.WARNING
    format_str = "[%(asctime)s] %(levelname)s: %(message)s"
    logging.basicConfig(
        level=level,
        format=format_str,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_params(args: argparse.Namespace) -> dict[str, str]:
    """Translate CLI arguments into help request parameters."""
    params: dict[str, str] = {}
    if args.help_number is not None:
        params[PARAM_IDENTIFIER] = args.help_number
    if args.module:
        params[PARAM_MODULE] = args.module
    if args.scope:
        params[PARAM_SCOPE] = args.scope
    for index, value in enumerate(args.variables, start=1):
        params[f"{PARAM_VARIABLE_PREFIX}{index}"] = value
    return params


def run(args: argparse.Namespace) -> int:
    """
    Render the requested help page to stdout.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    settings = get_settings()

    # CLI args override env vars
    overrides = {}
    if args.language:
        overrides["language"] = args.language
    if args.registry:
        overrides["registry_file"] = args.registry
    if overrides:
        settings = settings.model_copy(update=overrides)

    setup_logging(args.verbose or settings.verbose)

    try:
        settings.validate_paths()
        service = create_help_page_service(settings)
    except ConfigError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except RegistryError as e:
        print(f"Error: {e.message} ({e.path})", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        page = service.handle(build_params(args))
    except Exception as e:
        logger.exception("Unexpected error while rendering help page")
        print(f"Error: Unexpected error: {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR

    sys.stdout.write(page.text)

    if page.error is not None:
        return page.error.exit_code
    return EXIT_SUCCESS


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    return run(args)


if __name__ == "__main__":
    sys.exit(main())

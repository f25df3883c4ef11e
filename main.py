# main.py

"""Entry point for the jewel_search application (TUI or headless CLI)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("jewel_search.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="jewel_search",
        description="Jewellery catalog autocomplete and typo-tolerant search.",
        epilog=f"Default catalog: {Settings.CATALOG_PATH}",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Search query. Omit to launch the interactive TUI.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "-c",
        "--catalog",
        default=None,
        dest="catalog_path",
        help="Path to a catalog JSON file.",
    )
    parser.add_argument(
        "-l",
        "--limit",
        type=int,
        default=None,
        help=f"Maximum suggestions (default: {Settings.SUGGESTION_LIMIT}).",
    )
    parser.add_argument(
        "--context",
        action="store_true",
        default=False,
        help="Print the catalog summary for the shopping assistant.",
    )
    return parser


def _run_tui(catalog_path: str | None) -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import JewelSearchApp

    try:
        app = JewelSearchApp(catalog_path=catalog_path)
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("jewel_search TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Run a headless search and exit."""
    from src.cli.runner import cli_search

    exit_code = cli_search(
        query=args.query,
        output_format=args.output_format,
        catalog_path=args.catalog_path,
        limit=args.limit,
    )
    sys.exit(exit_code)


def _run_context(args: argparse.Namespace) -> None:
    """Print the assistant context summary and exit."""
    from src.cli.runner import run_ai_context

    sys.exit(run_ai_context(args.catalog_path))


def main() -> None:
    """Route to TUI (no args) or headless CLI (query provided)."""
    log_file = setup_logging()
    logger.info("jewel_search starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.context:
        _run_context(args)
    elif args.query is None:
        _run_tui(args.catalog_path)
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()

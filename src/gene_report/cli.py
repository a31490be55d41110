"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys

from gene_report import __version__
from gene_report.config import get_settings
from gene_report.errors import GeneReportError
from gene_report.flows.report import build_gene_report
from gene_report.schemas import validate_gene_symbol
from gene_report.store import GeneStore

logger = logging.getLogger("gene_report")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
PROMPT = "Enter the gene name: "


def configure_logging(level: str) -> None:
    """Attach a stream handler to the package logger (once)."""
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="gene-report",
        description="Gene metadata from NCBI, Ensembl and UCSC in one report",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'run' command - fetch, store and render one gene
    run_parser = subparsers.add_parser("run", help="Build the report for one gene")
    run_parser.add_argument(
        "symbol",
        nargs="?",
        default=None,
        help="Gene symbol, e.g. ABCG2 (prompted for when omitted)",
    )
    run_parser.add_argument("--db", default=None, help="Database URL (default from settings)")
    run_parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for the report file (default from settings)",
    )

    # 'show' command - print the stored record without fetching
    show_parser = subparsers.add_parser("show", help="Show the stored record for a gene")
    show_parser.add_argument("symbol", help="Gene symbol")
    show_parser.add_argument("--db", default=None, help="Database URL (default from settings)")

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def cmd_run(args: argparse.Namespace) -> int:
    """Handle the 'run' command."""
    try:
        raw = args.symbol if args.symbol is not None else input(PROMPT)
    except EOFError:
        # Ctrl-D at the prompt: no symbol given
        raw = ""

    try:
        symbol = validate_gene_symbol(raw)
        result = build_gene_report(symbol, database_url=args.db, output_dir=args.output_dir)
    except (GeneReportError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Report written to {result['report']}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the 'show' command."""
    settings = get_settings()
    try:
        symbol = validate_gene_symbol(args.symbol)
        with GeneStore(args.db or settings.database_url) as store:
            rows = store.read_unified(symbol)
    except GeneReportError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not rows:
        print(f"No stored record for {symbol}; run it first.", file=sys.stderr)
        return 1

    for row in rows:
        for label, text in row.display_fields():
            print(f"{label}: {text}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Database: {settings.database_url}")
    print(f"Output: {settings.output_dir}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    settings = get_settings()
    debug = getattr(args, "debug", False) or settings.debug
    configure_logging("DEBUG" if debug else settings.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "run": cmd_run,
        "show": cmd_show,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())

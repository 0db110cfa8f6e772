"""CLI entrypoint for xmlclasscheck."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, PluginConfig, load_config
from .logging import configure_logging
from .plugin import XMLClassReferencePlugin
from .reporting import StreamSink
from .symbols import load_symbol_table


def _add_logging_options(parser: argparse.ArgumentParser, *, subcommand: bool = False) -> None:
    # Subcommand copies must not reset values given before the subcommand.
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if subcommand else False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        default=argparse.SUPPRESS if subcommand else None,
        help="Also write log records to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xmlclasscheck",
        description="Check that classes referenced from XML files are declared.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check",
        help="Scan an XML directory and report unknown or malformed class references.",
    )
    _add_logging_options(check_parser, subcommand=True)
    check_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory holding .xmlclasscheck.yml (defaults to current directory).",
    )
    check_parser.add_argument(
        "--config",
        default=None,
        help="Explicit path to a configuration file.",
    )
    check_parser.add_argument(
        "--xml-dir",
        default=None,
        help="Directory containing XML files (overrides config 'xml_dir').",
    )
    check_parser.add_argument(
        "--symbols",
        default=None,
        help="File listing declared classes, one per line or as a YAML list.",
    )
    check_parser.add_argument(
        "--project-root",
        default=None,
        help="Root used to make reported paths relative.",
    )
    check_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format for diagnostics (default: text).",
    )
    check_parser.add_argument(
        "--report-parse-errors",
        action="store_true",
        default=None,
        help="Report unparsable XML files as diagnostics instead of only warning.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for xmlclasscheck commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    if args.command != "check":  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if config.symbols is None:
        parser.exit(1, "missing symbols file, pass --symbols or set 'symbols' in the config\n")

    try:
        symbols = load_symbol_table(config.symbols)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    sink = StreamSink(sys.stdout, fmt=args.format)
    try:
        plugin = XMLClassReferencePlugin(config, symbols, sink)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    summary = plugin.before_analyze()
    sink.flush()
    return 1 if summary.diagnostics else 0


def _resolve_config(args: argparse.Namespace) -> PluginConfig:
    config = load_config(Path(args.config) if args.config else Path(args.path))
    if args.xml_dir is not None:
        config.xml_dir = Path(args.xml_dir) if args.xml_dir.strip() else None
    if args.symbols is not None:
        config.symbols = Path(args.symbols)
    if args.project_root is not None:
        config.project_root = Path(args.project_root)
    if config.project_root is None:
        config.project_root = config.root
    if args.report_parse_errors is not None:
        config.report_parse_errors = bool(args.report_parse_errors)
    return config


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

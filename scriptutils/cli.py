"""Command-line interface for script-utils."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from .commands import run_command
from .config import CONVERTER_BINARY, LOG_FILE_PATH, NO_COLOR, log_startup_config
from .extract import extract_text_with_outcome
from .logger import StatusReporter, build_logger
from .normalize import normalize_lines
from .schema import ConversionOutcome, ExtractionResult
from .styles import Style, StyleRenderer
from .utils import ConversionIncomplete, FallbackFailure, ToolkitError, time_diff


def build_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="scriptutils",
        description="Helpers for automation scripts: text extraction, line cleanup, command running.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=LOG_FILE_PATH,
        metavar="FILE",
        help="Append warnings and errors to FILE (default: SCRIPTUTILS_LOG_FILE).",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        default=NO_COLOR,
        help="Disable colored output.",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the active configuration before running.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    extract = sub.add_parser("extract", help="Convert a document to a .txt file next to it.")
    extract.add_argument("document_path", help="Path to the document (usually a PDF).")
    extract.add_argument("--silent", action="store_true", help="Do not report the outcome.")
    extract.add_argument(
        "--converter",
        type=str,
        default=CONVERTER_BINARY,
        help=f"External converter program (default: {CONVERTER_BINARY}).",
    )
    extract.add_argument(
        "--json",
        action="store_true",
        help="Print the extraction result as JSON on stdout.",
    )

    normalize = sub.add_parser("normalize", help="Print the unique, upper-cased lines of a file.")
    normalize.add_argument("text_path", help="Text file to read.")

    run = sub.add_parser("run", help="Run a command line (split on whitespace, no quoting).")
    run.add_argument("command_line", help='Command line, e.g. "echo hi".')
    return parser


def _extract(args: argparse.Namespace, reporter: StatusReporter) -> int:
    try:
        result = extract_text_with_outcome(
            args.document_path,
            reporter=reporter,
            silent=args.silent,
            converter=args.converter,
        )
    except ConversionIncomplete as exc:
        if args.json:
            failed = ExtractionResult(
                document_path=str(args.document_path),
                text_path=exc.text_path or "",
                outcome=ConversionOutcome.FAILED,
            )
            print(failed.model_dump_json(indent=2))
        raise
    if args.json:
        print(result.model_dump_json(indent=2))
    return 0


def _normalize(args: argparse.Namespace, reporter: StatusReporter) -> int:
    content = Path(args.text_path).read_text(encoding="utf-8-sig")
    for line in normalize_lines(content, reporter=reporter):
        print(line)
    return 0


def _run(args: argparse.Namespace, reporter: StatusReporter) -> int:
    started = time.time() * 1000
    run_command(args.command_line, reporter=reporter)
    reporter.debug(f"elapsed {time_diff(started, time.time() * 1000)}", Style.DIM)
    return 0


HANDLERS = {
    "extract": _extract,
    "normalize": _normalize,
    "run": _run,
}


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""

    parser = build_parser()
    args = parser.parse_args(argv)

    renderer = StyleRenderer(enabled=not args.no_color)
    reporter = StatusReporter(build_logger(args.log_file, renderer=renderer), renderer)
    if args.show_config:
        log_startup_config()

    try:
        return HANDLERS[args.command](args, reporter)
    except FallbackFailure:
        # already reported by the pipeline; only the process exit is left
        return 1
    except (ToolkitError, OSError) as exc:
        reporter.error(f"Error: {exc}", Style.RED, Style.BOLD)
        return 1
    except Exception as exc:  # pragma: no cover - safety net
        reporter.error(f"Unexpected error: {exc}", Style.RED, Style.BOLD)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())

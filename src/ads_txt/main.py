"""
Command-line entry point — wires settings, logging, the file source and the parser.

Composition root: the only place where the concrete source adapter is
instantiated and where the parse mode is decided.

    ads-txt-parse ./ads.txt              # mode from settings (lenient by default)
    ads-txt-parse ./app-ads.txt --strict

Prints a JSON report on stdout; logs go to stderr.

Exit status:
  0 — every non-comment line was a record or a variable
  1 — at least one line was rejected, or the file could not be read
  2 — configuration error
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

import structlog
from railway import LoggingExecutionContext
from railway.result import Result

from ads_txt import __version__
from ads_txt.adapters.file_source import FileAdsTxtSource
from ads_txt.config import AppSettings, ParseMode
from ads_txt.domain.ports import AdsTxtSource
from ads_txt.parser import parse, parse_report
from ads_txt.report import ParseReport, error_to_dict

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


def configure_structlog(log_level: str = "INFO") -> None:
    """
    Configure structlog for human-readable console output on stderr.

    stdout is reserved for the JSON report.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def parse_source(source: AdsTxtSource, mode: ParseMode) -> Result[ParseReport]:
    """
    Read the source and parse it in the requested mode.

    Strict mode turns a rejected line into a failure; lenient mode always
    yields a report (possibly listing errors). Read failures pass through.
    """
    if mode == "strict":
        return source.read().flat_map(parse).map(lambda document: ParseReport(document=document))
    return source.read().map(parse_report)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ads-txt-parse",
        description="Parse an ads.txt / app-ads.txt file and print a JSON report.",
    )
    parser.add_argument("path", help="Path to the ads.txt or app-ads.txt file")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--strict",
        dest="mode",
        action="store_const",
        const="strict",
        help="Stop at the first line that is neither a record nor a variable",
    )
    mode.add_argument(
        "--lenient",
        dest="mode",
        action="store_const",
        const="lenient",
        help="Report every line that is neither a record nor a variable",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run one parse and print its report. Returns the exit status."""
    args = build_arg_parser().parse_args(argv)

    try:
        settings = AppSettings()
    except Exception as e:
        print(f"FATAL: Configuration error — {e}", file=sys.stderr)  # noqa: T201
        return EXIT_CONFIG_ERROR

    configure_structlog(settings.log_level)
    log = structlog.get_logger()

    mode: ParseMode = args.mode or settings.parse.mode
    source = FileAdsTxtSource(args.path, encoding=settings.parse.encoding)
    log.info("cli.parse_started", path=args.path, mode=mode)

    result = LoggingExecutionContext(operation="ParseAdsTxt").execute(
        lambda: parse_source(source, mode)
    )

    if result.is_failure():
        error = result.error()
        log.error("cli.parse_failed", path=args.path, failure=str(error))
        print(json.dumps({"valid": False, "errors": [error_to_dict(error)]}, indent=2))  # noqa: T201
        return EXIT_INVALID

    report = result.value()
    log.info(
        "cli.parse_completed",
        path=args.path,
        records=len(report.document.records),
        variables=len(report.document.variables),
        errors=len(report.errors),
    )
    print(json.dumps(report.to_dict(), indent=2))  # noqa: T201
    return EXIT_OK if report.is_valid else EXIT_INVALID


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()

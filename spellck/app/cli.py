# spellck/app/cli.py
"""
spellck standalone entry point.

Flow:
1) Load config + configure logging.
2) Build the Dictionary once (default list and/or -d files).
3) Import processors (they self-register into the registry).
4) Run the orchestrator over the given files/folders.
5) Emit the report; exit status tells the caller how it went.

Exit status:
    0   no misspellings
    1   misspellings reported (or a file could not be parsed)
    2   configuration error (e.g. no dictionary at all)
    10  a dictionary or source file could not be read
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from spellck.core.errors import ConfigError, SourceReadError
from spellck.core.interfaces import ReportWriter
from spellck.infra.config_loader import load_config, severity_from_config
from spellck.infra.exporters import CsvReportWriter, JsonReportWriter, TextReportWriter
from spellck.infra.logging_config import configure_logging
from spellck.infra.word_sources import FileWordSource, build_dictionary, default_source
from spellck.services.orchestrator import Orchestrator

# Import processors so they self-register with the registry on import.
import spellck.processors.python_processor  # noqa: F401

EXIT_OK = 0
EXIT_MISSPELLED = 1
EXIT_CONFIG_ERROR = 2
EXIT_READ_ERROR = 10

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spellck",
        description="Report misspelled words in the public names and docstrings of Python code.",
    )
    parser.add_argument("paths", nargs="+", metavar="PATH", help="source file or folder to check")
    parser.add_argument(
        "-d", "--dict", dest="dicts", action="append", default=[], metavar="PATH",
        help="dictionary file (a list of words, one per line); may be repeated",
    )
    parser.add_argument(
        "-n", "--no-def-dict", action="store_true",
        help="don't use the default dictionary",
    )
    parser.add_argument(
        "-f", "--format", choices=["text", "json", "csv"], default="text",
        help="report format (default: text)",
    )
    parser.add_argument(
        "-o", "--output", metavar="FILE",
        help="write the report to FILE (text goes to stderr by default; required for json/csv)",
    )
    parser.add_argument("--log-level", metavar="LEVEL", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.format != "text" and not args.output:
        parser.error(f"--format {args.format} needs --output")

    cfg = load_config()
    configure_logging(args.log_level or cfg["log_level"], cfg.get("log_dir"))

    try:
        severity = severity_from_config(cfg)
        dictionary = build_dictionary(
            [FileWordSource(p) for p in args.dicts],
            include_default=not args.no_def_dict,
            default=default_source(cfg),
        )
        orchestrator = Orchestrator(
            dictionary,
            severity=severity,
            target_extensions=cfg["target_extensions"],
            ignore_dirs=cfg["ignore_dirs"],
        )
        report = orchestrator.run(args.paths)
    except SourceReadError as exc:
        print(f"spellck: {exc}", file=sys.stderr)
        return EXIT_READ_ERROR
    except ConfigError as exc:
        print(f"spellck: configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    _writer(args.format, args.output).write(report)
    log.info(
        "Checked %d file(s), %d record(s); %d diagnostic(s)",
        report.files_checked, report.records_checked, len(report.diagnostics),
    )
    return EXIT_OK if report.passed else EXIT_MISSPELLED


def _writer(fmt: str, output: Optional[str]) -> ReportWriter:
    if fmt == "json":
        return JsonReportWriter(output)
    if fmt == "csv":
        return CsvReportWriter(output)
    if output:
        return _FileTextWriter(output)
    return TextReportWriter(sys.stderr)


class _FileTextWriter:
    def __init__(self, path: str) -> None:
        self.path = path

    def write(self, report) -> None:
        with open(self.path, "w", encoding="utf-8") as fp:
            TextReportWriter(fp).write(report)


if __name__ == "__main__":
    sys.exit(main())

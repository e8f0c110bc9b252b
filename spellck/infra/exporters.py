# spellck/infra/exporters.py
"""
Writers for a finished RunReport.

- TextReportWriter: the human-readable emitter. Two lines per diagnostic
  (message, then the source line where the span starts) and a final status.
- JsonReportWriter: one JSON document with totals and diagnostics[].
- CsvReportWriter: one row per diagnostic.

Usage:
    from spellck.infra.exporters import TextReportWriter, JsonReportWriter
    TextReportWriter(sys.stderr).write(report)
    JsonReportWriter("spelling.json").write(report)
"""

from __future__ import annotations

import csv
import json
import linecache
import sys
from pathlib import Path
from typing import Any, Dict, Optional, TextIO, Union

from spellck.core.interfaces import ReportWriter
from spellck.core.models import Diagnostic, RunReport


def source_line(diagnostic: Diagnostic) -> Optional[str]:
    """The source line at the start of the diagnostic's span, if readable."""
    span = diagnostic.span
    linecache.checkcache(str(span.path))
    line = linecache.getline(str(span.path), span.line)
    if not line:
        return None
    return line.rstrip("\r\n")


def format_diagnostic(diagnostic: Diagnostic) -> str:
    where = diagnostic.span.location()
    head = f"{where}: {diagnostic.severity.value.lower()}: {diagnostic.message}"
    preview = source_line(diagnostic)
    if preview is None:
        return head
    return f"{head}\n{where}: {preview}"


def status_line(report: RunReport) -> str:
    if report.passed:
        return f"spellck: no misspellings found ({report.files_checked} file(s) checked)"
    parts = []
    if report.diagnostics:
        parts.append(
            f"{len(report.diagnostics)} misspelling report(s) in "
            f"{len(report.files_with_diagnostics())} file(s)"
        )
    if report.files_failed:
        parts.append(f"{len(report.files_failed)} file(s) could not be parsed")
    return "spellck: " + "; ".join(parts)


def _diagnostic_to_plain(d: Diagnostic) -> Dict[str, Any]:
    span = d.span
    return {
        "file": str(span.path),
        "line": span.line,
        "column": span.column + 1,
        "end_line": span.end_line,
        "end_column": span.end_column + 1,
        "kind": d.record.kind.value,
        "owner": d.record.owner,
        "severity": d.severity.value,
        "words": list(d.words),
        "message": d.message,
    }


class TextReportWriter(ReportWriter):
    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def write(self, report: RunReport) -> None:
        out = self.stream or sys.stderr
        for d in report.diagnostics:
            print(format_diagnostic(d), file=out)
        for path, reason in report.files_failed.items():
            print(f"{path}: error: {reason}", file=out)
        print(status_line(report), file=out)


class JsonReportWriter(ReportWriter):
    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def write(self, report: RunReport) -> None:
        payload = {
            "passed": report.passed,
            "totals": {
                "files_checked": report.files_checked,
                "records_checked": report.records_checked,
                "records_failed": report.records_failed,
                "diagnostics": len(report.diagnostics),
            },
            "files_failed": {str(p): reason for p, reason in report.files_failed.items()},
            "diagnostics": [_diagnostic_to_plain(d) for d in report.diagnostics],
        }
        self.path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


class CsvReportWriter(ReportWriter):
    """
    Writes a diagnostic-level table:
    File,Line,Column,Kind,Owner,Severity,Words
    """
    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def write(self, report: RunReport) -> None:
        with self.path.open("w", newline="", encoding="utf-8") as fp:
            w = csv.writer(fp)
            w.writerow(["File", "Line", "Column", "Kind", "Owner", "Severity", "Words"])
            for d in report.diagnostics:
                w.writerow([
                    str(d.span.path),
                    d.span.line,
                    d.span.column + 1,
                    d.record.kind.value,
                    d.record.owner,
                    d.severity.value,
                    " ".join(d.words),
                ])

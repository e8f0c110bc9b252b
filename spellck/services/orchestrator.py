# spellck/services/orchestrator.py
"""
High-level coordinator: discovers source files, builds SourceUnits via
processors, runs the spelling check on every Record, and aggregates the
Diagnostics into a RunReport.

Depends only on core (interfaces, models, registry), the spelling check and
utils.path_utils. Concrete processors register themselves on import.

Fault isolation:
- A Record whose check raises is logged and counted; the next Record runs.
- A file that fails to parse is recorded in RunReport.files_failed; the
  next file runs.
- A file that cannot be read at all (SourceReadError) stops the run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set, Tuple, Union

from spellck.checks.spelling_checks import SpellingCheck
from spellck.core.dictionary import Dictionary
from spellck.core.errors import SourceReadError
from spellck.core.interfaces import FileProcessor
from spellck.core.models import Diagnostic, Record, RunReport, Severity, SourceUnit
from spellck.core.registry import processors
from spellck.utils.path_utils import iter_target_files

log = logging.getLogger(__name__)

# on_progress(current_index, total_files, current_path)
ProgressFn = Callable[[int, int, Path], None]

# Processor used for files named explicitly whose extension is not registered.
DEFAULT_EXTENSION = ".py"


class Orchestrator:
    """
    Coordinates one checking run over a fixed Dictionary.

    Usage:
        orchestrator = Orchestrator(dictionary)
        report = orchestrator.run(["src/"])
    """

    def __init__(
        self,
        dictionary: Dictionary,
        severity: Severity = Severity.WARNING,
        on_progress: Optional[ProgressFn] = None,
        target_extensions: Optional[Iterable[str]] = None,
        ignore_dirs: Optional[Iterable[str]] = None,
    ) -> None:
        self.dictionary = dictionary
        self.severity = severity
        self._on_progress = on_progress
        self._target_extensions = target_extensions
        self._ignore_dirs = ignore_dirs

    def run(self, paths: Sequence[Union[str, Path]], report: Optional[RunReport] = None) -> RunReport:
        """
        Check every target file under `paths` and return the RunReport.
        Raises SourceReadError if a named path does not exist or cannot be read.
        """
        report = report if report is not None else RunReport()
        file_list, explicit = self._discover(paths)
        total = len(file_list)
        proc_index = self._index_processors()

        for i, fpath in enumerate(file_list, start=1):
            if self._on_progress:
                self._on_progress(i, total, fpath)

            processor = proc_index.get(fpath.suffix.lower())
            if processor is None and fpath in explicit:
                # a named file is a source file whatever its name (e.g. scripts)
                processor = proc_index.get(DEFAULT_EXTENSION)
            if processor is None:
                log.error("No processor registered for %s", fpath)
                report.files_failed[fpath] = f"no processor for '{fpath.suffix}' files"
                continue

            unit = self._safe_build_unit(processor, fpath, report)
            if unit is None:
                continue
            report.files_checked += 1
            self.check_unit(unit, report)

        return report

    def check_unit(self, unit: SourceUnit, report: Optional[RunReport] = None) -> RunReport:
        """Check one unit, honouring its per-file extra words."""
        dictionary = self.dictionary.with_words(unit.extra_words)
        if unit.extra_words:
            log.debug("%s: %d extra word(s) from inline directive", unit.path, len(unit.extra_words))
        return self.check_records(unit.records, report, dictionary=dictionary)

    def check_records(
        self,
        records: Iterable[Record],
        report: Optional[RunReport] = None,
        dictionary: Optional[Dictionary] = None,
    ) -> RunReport:
        """
        Run the spelling check on each Record, in order. Each Record is
        independent: a failure on one is logged and counted, never fatal.
        """
        report = report if report is not None else RunReport()
        check = SpellingCheck(dictionary if dictionary is not None else self.dictionary, self.severity)
        for record in records:
            report.records_checked += 1
            diagnostic = self._safe_run_check(check, record, report)
            if diagnostic is not None:
                report.diagnostics.append(diagnostic)
        return report

    # ---------- helpers ----------

    def _discover(self, paths: Sequence[Union[str, Path]]) -> Tuple[List[Path], Set[Path]]:
        """All target files, plus the subset named directly on the command line."""
        files: List[Path] = []
        explicit: Set[Path] = set()
        for raw in paths:
            p = Path(raw)
            if not p.exists():
                raise SourceReadError(p, "no such file or directory")
            if p.is_file():
                explicit.add(p)
            files.extend(iter_target_files(p, self._target_extensions, self._ignore_dirs))
        return files, explicit

    def _index_processors(self) -> Dict[str, FileProcessor]:
        """
        Build a mapping of extension -> processor instance.
        If multiple processors claim the same extension, the last one wins.
        """
        index: Dict[str, FileProcessor] = {}
        for p in processors():
            for ext in p.supports():
                index[ext.lower()] = p
        return index

    def _safe_build_unit(
        self, processor: FileProcessor, fpath: Path, report: RunReport
    ) -> Optional[SourceUnit]:
        """Build a SourceUnit; parse failures are recorded per file."""
        try:
            return processor.build_unit(fpath)
        except SourceReadError:
            raise
        except (SyntaxError, ValueError) as exc:
            reason = f"{exc.__class__.__name__}: {exc}"
            log.error("Could not parse %s: %s", fpath, reason)
            report.files_failed[fpath] = reason
            return None

    def _safe_run_check(
        self, check: SpellingCheck, record: Record, report: RunReport
    ) -> Optional[Diagnostic]:
        try:
            return check.run(record)
        except Exception:
            report.records_failed += 1
            log.exception("Check %r failed on %s; record skipped", check.name(), record.span.location())
            return None

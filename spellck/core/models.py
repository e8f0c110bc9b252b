# spellck/core/models.py
"""
Plain data shapes for spellck (no parsing, no I/O).
These are the "contracts" that processors, checks and writers speak.

Design goals:
- Minimal and framework-agnostic (easy to test and reason about).
- Immutable where it matters: a Record or Diagnostic is a value, never edited.
- The only mutable shape is RunReport, which the orchestrator fills in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Tuple


class Severity(Enum):
    """
    How serious a finding is. The host (flake8, CI) may still promote or
    silence a diagnostic; this is only the tag we attach.
    """
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class RecordKind(Enum):
    IDENTIFIER = "identifier"
    DOC_COMMENT = "doc-comment"


@dataclass(frozen=True)
class Span:
    """
    Where a Record lives in its source file.

    Fields:
    - path: the source file.
    - line / end_line: 1-based line numbers (as produced by `ast`).
    - column / end_column: 0-based character offsets (as produced by `ast`).
    """
    path: Path
    line: int
    column: int = 0
    end_line: int = 0
    end_column: int = 0

    def location(self) -> str:
        """Render as `path:line:col` with a 1-based column for humans."""
        return f"{self.path}:{self.line}:{self.column + 1}"


@dataclass(frozen=True)
class Token:
    """
    One candidate word.

    - text: the letters exactly as they appear in the source string.
    - normalized: lowercase form used for dictionary lookups.
    - offset: index of the first letter within the source string.
    """
    text: str
    normalized: str
    offset: int


@dataclass(frozen=True)
class Record:
    """
    One checkable unit handed over by a processor: either a declaration name
    or the raw text of its documentation.

    `suppressed` is decided by the processor (e.g. a `# spellck: ignore`
    marker); checks only honour it. `owner` is the dotted name of the
    declaration the record belongs to and is only used for reports.
    """
    span: Span
    text: str
    kind: RecordKind
    suppressed: bool = False
    owner: str = ""


@dataclass(frozen=True)
class Diagnostic:
    """
    Outcome for a Record that contains unknown words.

    `words` keeps first-seen order and holds each word once.
    """
    record: Record
    words: Tuple[str, ...]
    severity: Severity = Severity.WARNING

    @property
    def span(self) -> Span:
        return self.record.span

    @property
    def message(self) -> str:
        noun = "word" if len(self.words) == 1 else "words"
        return f"misspelled {noun}: {', '.join(self.words)}"


@dataclass(frozen=True)
class SourceUnit:
    """
    Everything a processor extracted from one source file.

    - records: public identifiers and doc texts, in source order.
    - extra_words: words accepted for this unit only (inline directive).
    """
    path: Path
    records: Tuple[Record, ...] = ()
    extra_words: Tuple[str, ...] = ()


@dataclass
class RunReport:
    """
    Container for everything a run produced. Mutable on purpose: the
    orchestrator appends to it as it processes files and records.
    """
    diagnostics: List[Diagnostic] = field(default_factory=list)
    files_checked: int = 0
    records_checked: int = 0
    records_failed: int = 0
    files_failed: Dict[Path, str] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return not self.diagnostics and not self.files_failed

    def files_with_diagnostics(self) -> List[Path]:
        seen: List[Path] = []
        for d in self.diagnostics:
            if d.span.path not in seen:
                seen.append(d.span.path)
        return seen

# spellck/processors/python_processor.py
"""
Python processor (FileProcessor): walks a module's syntax tree and hands the
checker one Record per public name and per docstring.

What counts as public:
- With a literal `__all__`, exactly the names it lists (top level only).
- Otherwise any top-level name not starting with an underscore.
- Inside a public class: methods, nested classes and class-level fields
  (assigned or annotated) not starting with an underscore.
- Dunder names are never checked; function bodies and parameters are never
  walked.

Markers understood here (the checker itself never sees source text):
- `# spellck: ignore` on a declaration (or decorator) line suppresses that
  declaration and everything nested inside it.
- `__spellck_extra_words__ = "foo bar"` at module level adds accepted words
  for this file only.
"""

from __future__ import annotations

import ast
import logging
import re
import tokenize
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Set, Union

from spellck.core.errors import SourceReadError
from spellck.core.interfaces import FileProcessor
from spellck.core.models import Record, RecordKind, SourceUnit, Span
from spellck.core.registry import register_processor

log = logging.getLogger(__name__)

EXTRA_WORDS_NAME = "__spellck_extra_words__"
_SUPPRESS_RE = re.compile(r"#\s*spellck:\s*ignore\b")



class PythonProcessor(FileProcessor):
    def supports(self):
        return [".py", ".pyi"]

    def build_unit(self, path: Path) -> SourceUnit:
        source = read_source(path)
        tree = ast.parse(source, filename=str(path))
        return collect_unit(tree, source, path)


def read_source(path: Union[str, Path]) -> str:
    """Read a Python file honouring its encoding cookie (PEP 263)."""
    try:
        with tokenize.open(path) as fp:
            return fp.read()
    except UnicodeDecodeError as exc:
        raise SourceReadError(path, f"cannot decode source ({exc.reason})") from exc
    except OSError as exc:
        raise SourceReadError(path, exc.strerror or str(exc)) from exc


def collect_unit(tree: ast.Module, source: str, path: Union[str, Path]) -> SourceUnit:
    """Build the SourceUnit for an already-parsed module."""
    walker = _PublicApiWalker(source, Path(path))
    walker.walk_module(tree)
    return SourceUnit(
        path=Path(path),
        records=tuple(walker.records),
        extra_words=tuple(walker.extra_words),
    )


class _PublicApiWalker:
    def __init__(self, source: str, path: Path) -> None:
        self.source = source
        self.lines = source.splitlines()
        self.path = path
        self.records: List[Record] = []
        self.extra_words: List[str] = []

    def walk_module(self, tree: ast.Module) -> None:
        self._add_doc(tree, owner=self.path.stem, suppressed=False)
        for node in tree.body:
            self._read_directive(node)
        self._walk_body(tree.body, prefix="", exported=_literal_all(tree), suppressed=False)

    # ---------- traversal ----------

    def _walk_body(
        self,
        body: Sequence[ast.stmt],
        prefix: str,
        exported: Optional[Set[str]],
        suppressed: bool,
    ) -> None:
        for node in body:
            if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
                if not _is_public(node.name, exported):
                    continue
                owner = prefix + node.name
                hidden = suppressed or self._is_marked(node)
                self._add_name(node.name, node, owner, hidden)
                self._add_doc(node, owner, hidden)
                if isinstance(node, ast.ClassDef):
                    self._walk_body(node.body, prefix=owner + ".", exported=None, suppressed=hidden)
            elif isinstance(node, (ast.Assign, ast.AnnAssign)):
                hidden = suppressed or self._is_marked(node)
                for target in _assigned_names(node):
                    if _is_public(target.id, exported):
                        self._add_name(target.id, target, prefix + target.id, hidden)

    # ---------- records ----------

    def _add_name(self, name: str, node: ast.AST, owner: str, suppressed: bool) -> None:
        self.records.append(
            Record(
                span=self._span(node),
                text=name,
                kind=RecordKind.IDENTIFIER,
                suppressed=suppressed,
                owner=owner,
            )
        )

    def _add_doc(self, node: ast.AST, owner: str, suppressed: bool) -> None:
        doc = _docstring_node(node)
        if doc is None:
            return
        raw = ast.get_source_segment(self.source, doc) or doc.value
        self.records.append(
            Record(
                span=self._span(doc),
                text=raw,
                kind=RecordKind.DOC_COMMENT,
                suppressed=suppressed,
                owner=owner,
            )
        )

    def _span(self, node: ast.AST) -> Span:
        line = getattr(node, "lineno", 1)
        return Span(
            path=self.path,
            line=line,
            column=getattr(node, "col_offset", 0),
            end_line=getattr(node, "end_lineno", None) or line,
            end_column=getattr(node, "end_col_offset", None) or 0,
        )

    # ---------- markers ----------

    def _is_marked(self, node: ast.stmt) -> bool:
        """True if a `# spellck: ignore` comment sits on a header line of `node`."""
        first = node.lineno
        for deco in getattr(node, "decorator_list", ()):
            first = min(first, deco.lineno)
        last = node.lineno
        if isinstance(node, (ast.Assign, ast.AnnAssign)):
            last = node.end_lineno or node.lineno
        for lineno in range(first, last + 1):
            if 0 < lineno <= len(self.lines) and _SUPPRESS_RE.search(self.lines[lineno - 1]):
                return True
        return False

    def _read_directive(self, node: ast.stmt) -> None:
        if not isinstance(node, (ast.Assign, ast.AnnAssign)):
            return
        if not any(t.id == EXTRA_WORDS_NAME for t in _assigned_names(node)):
            return
        value = node.value
        if isinstance(value, ast.Constant) and isinstance(value.value, str):
            self.extra_words.extend(value.value.split())
        else:
            log.warning(
                "%s:%d: malformed `%s` (expected a string literal); ignored",
                self.path, node.lineno, EXTRA_WORDS_NAME,
            )


# ---------- helpers (module-internal) ----------

def _is_public(name: str, exported: Optional[Set[str]]) -> bool:
    if name.startswith("__") and name.endswith("__"):
        return False
    if exported is not None:
        return name in exported
    return not name.startswith("_")


def _assigned_names(node: Union[ast.Assign, ast.AnnAssign]) -> Iterator[ast.Name]:
    targets = node.targets if isinstance(node, ast.Assign) else [node.target]
    for target in targets:
        if isinstance(target, ast.Name):
            yield target
        elif isinstance(target, (ast.Tuple, ast.List)):
            for elt in target.elts:
                if isinstance(elt, ast.Name):
                    yield elt


def _docstring_node(node: ast.AST) -> Optional[ast.Constant]:
    body = getattr(node, "body", None)
    if not body:
        return None
    first = body[0]
    if (
        isinstance(first, ast.Expr)
        and isinstance(first.value, ast.Constant)
        and isinstance(first.value.value, str)
    ):
        return first.value
    return None


def _literal_all(tree: ast.Module) -> Optional[Set[str]]:
    """Names in a literal module-level `__all__`, or None if there is none."""
    for node in tree.body:
        if not isinstance(node, (ast.Assign, ast.AnnAssign)):
            continue
        if not any(t.id == "__all__" for t in _assigned_names(node)):
            continue
        value = node.value
        if isinstance(value, (ast.List, ast.Tuple)) and all(
            isinstance(e, ast.Constant) and isinstance(e.value, str) for e in value.elts
        ):
            return {e.value for e in value.elts}
        return None
    return None


# Register on import so the orchestrator discovers it via the registry.
register_processor(PythonProcessor())

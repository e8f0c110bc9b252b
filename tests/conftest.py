# tests/conftest.py
import pytest

from spellck.core.dictionary import Dictionary
from spellck.core.models import Record, RecordKind, Span


@pytest.fixture
def small_dict():
    """A tiny dictionary; no built-in word list involved."""
    return Dictionary(["bad", "foo", "bar", "server", "http", "config", "the", "a", "is", "word"])


@pytest.fixture
def make_record(tmp_path):
    def _make(text, kind=RecordKind.IDENTIFIER, suppressed=False, line=1):
        return Record(
            span=Span(path=tmp_path / "mod.py", line=line),
            text=text,
            kind=kind,
            suppressed=suppressed,
        )
    return _make

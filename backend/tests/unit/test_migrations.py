"""Unit tests for schema migration of legacy notes tables."""

import sqlite3
from collections.abc import Iterator
from pathlib import Path

import pytest

from study_helper.services.store import NoteStore, ValidationError

_LEGACY_SCHEMA = """
CREATE TABLE notes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    content TEXT NOT NULL,
    type TEXT NOT NULL CHECK (type IN ('summary', 'translation', 'notes')),
    original_text TEXT,
    language TEXT,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
)
"""

_LEGACY_ROWS = [
    ("First summary", "summary", "2024-03-01 10:00:00"),
    ("Hola mundo", "translation", "2024-03-02 11:30:00"),
    ("Revision notes", "notes", "2024-03-03 09:15:00"),
]


def _make_legacy_db(db_path: Path, schema: str = _LEGACY_SCHEMA) -> None:
    conn = sqlite3.connect(db_path)
    conn.execute(schema)
    conn.executemany(
        "INSERT INTO notes (content, type, created_at) VALUES (?, ?, ?)",
        _LEGACY_ROWS,
    )
    conn.commit()
    conn.close()


def _columns(db_path: Path) -> list[str]:
    conn = sqlite3.connect(db_path)
    try:
        return [row[1] for row in conn.execute("PRAGMA table_info(notes)")]
    finally:
        conn.close()


@pytest.fixture()
def legacy_store(db_path: Path) -> Iterator[NoteStore]:
    _make_legacy_db(db_path)
    note_store = NoteStore(f"sqlite:///{db_path}")
    note_store.initialize()
    yield note_store
    note_store.close()


class TestLegacyMigration:
    def test_adds_title_column(self, legacy_store: NoteStore, db_path: Path) -> None:
        assert "title" in _columns(db_path)

    def test_existing_rows_are_untouched_and_have_null_title(self, legacy_store: NoteStore) -> None:
        notes = sorted(legacy_store.list_all(), key=lambda n: n.id)

        assert [(n.content, n.type, n.created_at.strftime("%Y-%m-%d %H:%M:%S")) for n in notes] == _LEGACY_ROWS
        assert all(n.title is None for n in notes)

    def test_rerunning_initialize_keeps_rows(self, legacy_store: NoteStore, db_path: Path) -> None:
        legacy_store.initialize()

        assert len(legacy_store.list_all()) == len(_LEGACY_ROWS)
        assert _columns(db_path).count("title") == 1

    def test_new_notes_get_ids_after_legacy_rows(self, legacy_store: NoteStore) -> None:
        note = legacy_store.create("New note", "notes", title="Fresh")

        assert note.id == len(_LEGACY_ROWS) + 1
        assert note.title == "Fresh"

    def test_legacy_constraint_rejects_mindmap(self, legacy_store: NoteStore) -> None:
        with pytest.raises(ValidationError):
            legacy_store.create('{"nodes": [], "edges": []}', "mindmap")

        assert len(legacy_store.list_all()) == len(_LEGACY_ROWS)

    def test_table_with_mindmap_but_no_title_is_migrated(self, db_path: Path) -> None:
        _make_legacy_db(db_path, _LEGACY_SCHEMA.replace("'notes')", "'notes', 'mindmap')"))
        note_store = NoteStore(f"sqlite:///{db_path}")

        note_store.initialize()
        note = note_store.create('{"nodes": [], "edges": []}', "mindmap", title="Map")

        assert note_store.get_by_id(note.id).title == "Map"
        assert "title" in _columns(db_path)

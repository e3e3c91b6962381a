"""Unit tests for NoteStore against a real SQLite file."""

import sqlite3
from pathlib import Path

import pytest

from study_helper.db import InitializationError
from study_helper.models.note import NOTE_TYPES
from study_helper.services.store import NoteStore, NotFoundError, ValidationError


def _index_names(db_path: Path) -> list[str]:
    conn = sqlite3.connect(db_path)
    try:
        rows = conn.execute(
            "SELECT name FROM sqlite_master WHERE type = 'index' AND tbl_name = 'notes' AND sql IS NOT NULL"
        ).fetchall()
    finally:
        conn.close()
    return sorted(r[0] for r in rows)


class TestNoteStoreCreate:
    @pytest.mark.parametrize("note_type", NOTE_TYPES)
    def test_created_note_is_returned_by_get(self, store: NoteStore, note_type: str) -> None:
        created = store.create("some content", note_type)

        fetched = store.get_by_id(created.id)

        assert fetched.content == "some content"
        assert fetched.type == note_type
        assert fetched.created_at is not None
        assert fetched.updated_at is not None

    def test_stores_optional_fields(self, store: NoteStore) -> None:
        created = store.create("Hola", "translation", "Hello", "Spanish", "Greeting")

        assert created.original_text == "Hello"
        assert created.language == "Spanish"
        assert created.title == "Greeting"

    def test_assigns_increasing_ids(self, store: NoteStore) -> None:
        first = store.create("a", "notes")
        second = store.create("b", "notes")

        assert second.id > first.id

    def test_rejects_unknown_type_without_inserting(self, store: NoteStore) -> None:
        with pytest.raises(ValidationError):
            store.create("x", "bogus")

        assert store.list_all() == []

    @pytest.mark.parametrize("content", ["", "   \n"])
    def test_rejects_empty_content(self, store: NoteStore, content: str) -> None:
        with pytest.raises(ValidationError):
            store.create(content, "notes")

        assert store.list_all() == []


class TestNoteStoreReadDelete:
    def test_list_all_returns_most_recent_first(self, store: NoteStore) -> None:
        ids = [store.create(f"note {i}", "notes").id for i in range(3)]

        listed = [n.id for n in store.list_all()]

        assert listed == list(reversed(ids))

    def test_list_all_orders_by_created_at_before_id(self, store: NoteStore, db_path: Path) -> None:
        older = store.create("older", "notes")
        newer = store.create("newer", "notes")
        conn = sqlite3.connect(db_path)
        conn.execute("UPDATE notes SET created_at = '2020-01-01 00:00:00' WHERE id = ?", (newer.id,))
        conn.commit()
        conn.close()

        assert [n.id for n in store.list_all()] == [older.id, newer.id]

    def test_get_missing_raises_not_found(self, store: NoteStore) -> None:
        with pytest.raises(NotFoundError):
            store.get_by_id(999)

    def test_delete_removes_note(self, store: NoteStore) -> None:
        note = store.create("bye", "summary")

        result = store.delete_by_id(note.id)

        assert result == {"id": note.id, "deleted": True}
        with pytest.raises(NotFoundError):
            store.get_by_id(note.id)

    def test_delete_missing_raises_and_keeps_rows(self, store: NoteStore) -> None:
        store.create("keep me", "notes")

        with pytest.raises(NotFoundError):
            store.delete_by_id(12345)

        assert len(store.list_all()) == 1


class TestNoteStoreInitialize:
    def test_creates_table_and_indexes(self, store: NoteStore, db_path: Path) -> None:
        assert _index_names(db_path) == ["idx_notes_created_at", "idx_notes_type"]

    def test_second_initialize_is_a_no_op(self, store: NoteStore, db_path: Path) -> None:
        store.create("persisted", "notes")

        store.initialize()

        assert _index_names(db_path) == ["idx_notes_created_at", "idx_notes_type"]
        assert [n.content for n in store.list_all()] == ["persisted"]

    def test_unopenable_path_raises_initialization_error(self, tmp_path: Path) -> None:
        note_store = NoteStore(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'study.db'}")

        with pytest.raises(InitializationError):
            note_store.initialize()

    def test_close_is_safe_when_never_opened_or_already_closed(self, db_path: Path) -> None:
        note_store = NoteStore(f"sqlite:///{db_path}")

        note_store.close()
        note_store.initialize()
        note_store.close()
        note_store.close()

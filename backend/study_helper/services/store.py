"""Note storage engine: owns the notes table, its migration, and single-row CRUD."""

import logging

from sqlalchemy import Engine, delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from study_helper.db import InitializationError, create_tables, make_engine
from study_helper.models.note import NOTE_TYPES, Note
from study_helper.schemas.note import NoteRecord

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when note input is rejected (empty content, unknown type, bad id)."""


class NotFoundError(Exception):
    """Raised when no note matches the requested id."""


class NoteStore:
    """Persists notes in a single SQLite table.

    The engine is created lazily on first use and shared by every caller of
    this store; each operation runs in its own short-lived session.
    """

    def __init__(self, database_url: str) -> None:
        self._database_url = database_url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    def _get_engine(self) -> Engine:
        if self._engine is None:
            self._engine = make_engine(self._database_url)
            self._session_factory = sessionmaker(bind=self._engine, autocommit=False, autoflush=False)
        return self._engine

    def _session(self) -> Session:
        self._get_engine()
        assert self._session_factory is not None
        return self._session_factory()

    def initialize(self) -> None:
        """Create or migrate the schema. Raises InitializationError on failure."""
        try:
            create_tables(self._get_engine())
        except SQLAlchemyError as exc:
            logger.error("database initialization failed: %s", exc)
            raise InitializationError(f"Could not initialize database: {exc}") from exc
        logger.info("database initialized at %s", self._database_url)

    def create(
        self,
        content: str,
        note_type: str,
        original_text: str | None = None,
        language: str | None = None,
        title: str | None = None,
    ) -> NoteRecord:
        """Insert a note and return it with its assigned id and timestamps."""
        if not content or not content.strip():
            raise ValidationError("Note content is required")
        if note_type not in NOTE_TYPES:
            raise ValidationError(f"Invalid note type: {note_type!r}")

        note = Note(
            title=title,
            content=content,
            type=note_type,
            original_text=original_text,
            language=language,
        )
        with self._session() as db:
            db.add(note)
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise ValidationError(f"Note rejected by the database: {exc.orig}") from exc
            db.refresh(note)
            record = NoteRecord.model_validate(note)
        logger.info("note saved with id %d", record.id)
        return record

    def list_all(self) -> list[NoteRecord]:
        """Return every note, most recent first."""
        with self._session() as db:
            notes = db.scalars(select(Note).order_by(Note.created_at.desc(), Note.id.desc())).all()
            records = [NoteRecord.model_validate(n) for n in notes]
        logger.info("fetched %d notes", len(records))
        return records

    def get_by_id(self, note_id: int) -> NoteRecord:
        with self._session() as db:
            note = db.get(Note, note_id)
            if note is None:
                raise NotFoundError("Note not found")
            return NoteRecord.model_validate(note)

    def delete_by_id(self, note_id: int) -> dict[str, int | bool]:
        """Hard-delete the note; raise NotFoundError if nothing was deleted."""
        with self._session() as db:
            result = db.execute(delete(Note).where(Note.id == note_id))
            db.commit()
        if result.rowcount == 0:
            raise NotFoundError("Note not found")
        logger.info("note %d deleted", note_id)
        return {"id": note_id, "deleted": True}

    def close(self) -> None:
        """Release the engine. Safe to call when already closed or never opened."""
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("database connection closed")

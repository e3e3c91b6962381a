"""SQLAlchemy engine factory and schema management for the notes database."""

import logging

from sqlalchemy import Connection, Engine, create_engine, inspect, text
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class InitializationError(Exception):
    """Raised when the database cannot be opened or its schema prepared."""


def make_engine(database_url: str) -> Engine:
    return create_engine(database_url)


def _table_sql(conn: Connection, table_name: str) -> str | None:
    row = conn.execute(
        text("SELECT sql FROM sqlite_master WHERE type = 'table' AND name = :name"),
        {"name": table_name},
    ).first()
    return row[0] if row else None


def create_tables(engine: Engine) -> None:
    """Create or migrate the notes table and ensure its lookup indexes.

    Idempotent: safe to run on every startup. A legacy table (missing the
    ``title`` column or the ``mindmap`` type) is migrated additively; rows
    are never rewritten.
    """
    # Import models so Base.metadata includes them before create_all().
    from study_helper.models.note import Note

    table = Note.__table__
    with engine.begin() as conn:
        existing_sql = _table_sql(conn, table.name)
        if existing_sql is None:
            Base.metadata.create_all(bind=conn)
            logger.info("notes table created")
        else:
            columns = {c["name"] for c in inspect(conn).get_columns(table.name)}
            if "title" not in columns:
                logger.info("migrating notes table: adding title column")
                conn.execute(text("ALTER TABLE notes ADD COLUMN title TEXT"))
            if "'mindmap'" not in existing_sql:
                # SQLite cannot alter a CHECK constraint without rebuilding the table.
                logger.warning("notes table type constraint predates 'mindmap'; mind maps cannot be stored")
            logger.info("notes table verified")

        for index in table.indexes:
            index.create(bind=conn, checkfirst=True)
    logger.info("database indexes created/verified")

"""Note ORM model."""

from datetime import datetime

from sqlalchemy import CheckConstraint, Index, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from study_helper.db import Base

NOTE_TYPES = ("summary", "translation", "notes", "mindmap")


class Note(Base):
    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(Text, nullable=False)
    original_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    language: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(nullable=False, server_default=func.current_timestamp())
    # Set at insertion only; no operation mutates a stored note.
    updated_at: Mapped[datetime] = mapped_column(nullable=False, server_default=func.current_timestamp())

    __table_args__ = (
        CheckConstraint(
            "type IN (" + ", ".join(f"'{t}'" for t in NOTE_TYPES) + ")",
            name="ck_notes_type",
        ),
        Index("idx_notes_type", "type"),
        Index("idx_notes_created_at", "created_at"),
        {"sqlite_autoincrement": True},
    )

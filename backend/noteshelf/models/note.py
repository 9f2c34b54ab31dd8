"""
NoteShelf Backend: Note SQLAlchemy Model
========================================

What:  ORM model for the `notes` table.
Who:   Used by NoteManager for CRUD operations and by Alembic.

Table Design:
    - Integer primary key generated by the store
    - title / content: free text with creation-time defaults applied by NoteManager
    - category_id: nullable reference to categories.id

    category_id deliberately carries no FOREIGN KEY constraint. Whether a
    reference must point at a live category is decided by the reference
    policy in services/note_manager.py, not by the schema.

Index on category_id:
    Serves GET /categories/{id}/notes (WHERE category_id = :id).
"""

from typing import Optional

from sqlalchemy import Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from noteshelf.database import Base


class Note(Base):
    """
    A free-text note, optionally associated with one category.

    Lifecycle:
        1. Created by NoteManager.create_note (category_id = NULL)
        2. Title/content replaced by update_note; association set/cleared freely
        3. Hard-deleted by delete_note
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="Untitled",
        comment="Note title; 'Untitled' when none was given at creation",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Note body",
    )

    category_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        default=None,
        comment="Optional reference to categories.id (no FK constraint)",
    )

    __table_args__ = (
        Index("idx_notes_category_id", "category_id"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}', category_id={self.category_id})>"

"""
NoteShelf Backend: Category SQLAlchemy Model
============================================

What:  ORM model for the `categories` table.
Who:   Used by CategoryManager, the strict category reference check, and Alembic.

Table Design:
    - Integer primary key generated by the store
    - category_name: up to 255 characters, no uniqueness constraint
    - is_deleted: soft-delete flag; rows are never removed through the API
"""

from sqlalchemy import Boolean, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column

from noteshelf.database import Base

CATEGORY_NAME_MAX_LENGTH = 255


class Category(Base):
    """
    A user-defined grouping for notes.

    Lifecycle:
        active ⇄ soft-deleted, toggled by CategoryManager.set_category_deleted.
        Notes referencing a soft-deleted category keep their category_id.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    category_name: Mapped[str] = mapped_column(
        String(CATEGORY_NAME_MAX_LENGTH),
        nullable=False,
        comment="Display name chosen by the user",
    )

    is_deleted: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
        comment="Soft-delete flag; the row is kept and notes keep referencing it",
    )

    def __repr__(self) -> str:
        return (
            f"<Category(id={self.id}, category_name='{self.category_name}', "
            f"is_deleted={self.is_deleted})>"
        )

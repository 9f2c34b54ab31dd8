"""
NoteShelf Backend: Note Manager
===============================

What:  Owns note records and their optional reference to a category.
How:   Wraps one AsyncSession (injected at construction). Lookups come in two
       forms: find_note() returns None for a missing id, get_note() raises
       NotFoundError so the HTTP boundary can answer 404.
Who:   Built per request by routes/dependencies.py; CategoryManager borrows
       list_notes_by_category().

Creation defaults:
    title   → "Untitled" when omitted or empty
    content → ""         when omitted or empty
    category_id starts NULL

Category reference policy:
    set_note_category() passes every non-null category id through a single
    async hook, `category_check(session, category_id)`. The default,
    allow_any_category, accepts any id (no FK constraint exists either).
    require_active_category rejects unknown and soft-deleted categories.
    The policy is picked once, at dependency wiring, from
    settings.strict_category_references.
"""

import logging
from typing import Awaitable, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteshelf.exceptions import DatabaseError, NotFoundError, ValidationError
from noteshelf.models.note import Note
from noteshelf.services.category_manager import CategoryManager

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled"
DEFAULT_CONTENT = ""

CategoryCheck = Callable[[AsyncSession, int], Awaitable[None]]


# ══════════════════════════════════════════════════════════════════════════
# Category reference policies
# ══════════════════════════════════════════════════════════════════════════


async def allow_any_category(session: AsyncSession, category_id: int) -> None:
    """Relaxed referential integrity: every category id is accepted as-is."""
    return None


async def require_active_category(session: AsyncSession, category_id: int) -> None:
    """
    Strict referential integrity.

    Raises:
        ValidationError: The category does not exist or is soft-deleted.
    """
    category = await CategoryManager(session).find_category(category_id)
    if category is None:
        raise ValidationError(
            message=f"Category {category_id} does not exist",
            field="category_id",
            context={"category_id": category_id},
        )
    if category.is_deleted:
        raise ValidationError(
            message=f"Category {category_id} has been deleted",
            field="category_id",
            context={"category_id": category_id},
        )


# ══════════════════════════════════════════════════════════════════════════
# Manager
# ══════════════════════════════════════════════════════════════════════════


class NoteManager:
    """
    Business logic layer for note operations.

    Error Handling Strategy:
        SQLAlchemy errors are logged and re-raised as DatabaseError with a
        message naming the failed operation. NotFoundError and
        ValidationError propagate unchanged.
    """

    def __init__(
        self,
        session: AsyncSession,
        category_check: CategoryCheck = allow_any_category,
    ):
        self.session = session
        self.category_check = category_check

    async def _flush(self, action: str, note_id: Optional[int] = None) -> None:
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error("Database error (%s) on note %s: %s", action, note_id, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not {action} the note. Please try again.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            ) from e

    # ── Reads ─────────────────────────────────────────────────────────────

    async def list_notes(self) -> List[Note]:
        """All notes in store order (ascending id). Display ordering is a client concern."""
        return await self._select(select(Note).order_by(Note.id))

    async def list_notes_by_category(self, category_id: int) -> List[Note]:
        """Notes whose category_id equals `category_id`, regardless of the category's state."""
        query = select(Note).where(Note.category_id == category_id).order_by(Note.id)
        return await self._select(query)

    async def _select(self, query) -> List[Note]:
        try:
            result = await self.session.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

    async def find_note(self, note_id: int) -> Optional[Note]:
        """Look up a note by id; None when it does not exist."""
        try:
            return await self.session.get(Note, note_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            ) from e

    async def get_note(self, note_id: int) -> Note:
        """
        Retrieve a single note by id.

        Raises:
            NotFoundError: Note with given id does not exist (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        note = await self.find_note(note_id)
        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        return note

    # ── Writes ────────────────────────────────────────────────────────────

    async def create_note(
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> Note:
        """Create a note, applying the "Untitled"/"" defaults to falsy fields."""
        note = Note(
            title=title or DEFAULT_TITLE,
            content=content or DEFAULT_CONTENT,
            category_id=None,
        )
        self.session.add(note)
        await self._flush("create")
        logger.info("Note created: %s", note.id)
        return note

    async def update_note(self, note_id: int, title: str, content: str) -> Note:
        """
        Replace both title and content.

        Not a patch: both values are written exactly as given.
        """
        note = await self.get_note(note_id)
        note.title = title
        note.content = content
        await self._flush("update", note_id)
        return note

    async def delete_note(self, note_id: int) -> Note:
        """Hard-delete a note and return its state prior to deletion."""
        note = await self.get_note(note_id)
        snapshot = Note(
            id=note.id,
            title=note.title,
            content=note.content,
            category_id=note.category_id,
        )
        await self.session.delete(note)
        await self._flush("delete", note_id)
        logger.info("Note deleted: %s", note_id)
        return snapshot

    async def set_note_category(self, note_id: int, category_id: Optional[int]) -> Note:
        """
        Associate a note with a category, or clear the association with None.

        Only the note's existence is required; the category id goes through
        the configured reference policy.
        """
        note = await self.get_note(note_id)
        if category_id is not None:
            await self.category_check(self.session, category_id)
        note.category_id = category_id
        await self._flush("update", note_id)
        logger.info("Note %s category_id=%s", note_id, category_id)
        return note

    async def clear_note_category(self, note_id: int) -> Note:
        return await self.set_note_category(note_id, None)

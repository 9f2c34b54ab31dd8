"""
NoteShelf Backend: Category Manager
===================================

What:  Owns category records and their soft-delete flag.
How:   Wraps one AsyncSession (injected at construction) and exposes the
       category operations. Store faults are wrapped in DatabaseError.
Who:   Built per request by routes/dependencies.py; also used by the strict
       category reference check in note_manager.py.

Operations:
    list_categories()          all categories (soft-deleted included by default)
    find_category(id)          Category or None
    get_category(id)           Category or NotFoundError
    create_category(name)      new active category
    set_category_deleted(id)   flip the soft-delete flag
    list_notes_for_category()  notes whose category_id matches, via NoteManager

There is no rename and no hard delete: creation and the flag flip are the
only mutations.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteshelf.exceptions import DatabaseError, NotFoundError, ValidationError
from noteshelf.models.category import CATEGORY_NAME_MAX_LENGTH, Category
from noteshelf.models.note import Note

logger = logging.getLogger(__name__)


class CategoryManager:
    """Business logic for categories, bound to one session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_categories(self, include_deleted: bool = True) -> List[Category]:
        """
        Return categories in id order.

        By default soft-deleted categories are included and callers filter for
        display; include_deleted=False returns only the selectable (active) set.
        """
        query = select(Category).order_by(Category.id)
        if not include_deleted:
            query = query.where(Category.is_deleted.is_(False))
        try:
            result = await self.session.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing categories: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve categories. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

    async def find_category(self, category_id: int) -> Optional[Category]:
        """Look up a category by id; None when it does not exist."""
        try:
            return await self.session.get(Category, category_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching category %s: %s", category_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the category. Please try again.",
                context={"category_id": category_id, "error_type": type(e).__name__},
            ) from e

    async def get_category(self, category_id: int) -> Category:
        """
        Retrieve a category by id.

        Raises:
            NotFoundError: No category with this id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        category = await self.find_category(category_id)
        if category is None:
            raise NotFoundError(resource="category", resource_id=category_id)
        return category

    async def create_category(self, category_name: str) -> Category:
        """
        Create an active category.

        The name must contain at least one non-whitespace character and fit
        the column (255 characters); it is stored exactly as supplied.
        """
        if not isinstance(category_name, str) or not category_name.strip():
            raise ValidationError(
                message="category_name must not be empty",
                field="category_name",
            )
        if len(category_name) > CATEGORY_NAME_MAX_LENGTH:
            raise ValidationError(
                message=f"category_name must be at most {CATEGORY_NAME_MAX_LENGTH} characters",
                field="category_name",
                context={"length": len(category_name)},
            )

        category = Category(category_name=category_name, is_deleted=False)
        try:
            self.session.add(category)
            await self.session.flush()  # Assigns the id without committing
        except SQLAlchemyError as e:
            logger.error("Database error creating category: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the category. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Category created: %s (%r)", category.id, category.category_name)
        return category

    async def set_category_deleted(self, category_id: int, is_deleted: bool) -> Category:
        """
        Set the soft-delete flag and return the updated category.

        Idempotent. Notes referencing the category are left untouched.
        """
        category = await self.get_category(category_id)
        category.is_deleted = is_deleted
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating category %s: %s", category_id, str(e))
            raise DatabaseError(
                message="Could not update the category. Please try again.",
                context={"category_id": category_id, "error_type": type(e).__name__},
            ) from e

        logger.info("Category %s is_deleted=%s", category_id, is_deleted)
        return category

    async def list_notes_for_category(self, category_id: int) -> List[Note]:
        """
        Notes whose category_id equals `category_id`.

        No existence check: an unknown category simply has no notes, and the
        category's is_deleted flag does not affect the result.
        """
        from noteshelf.services.note_manager import NoteManager

        return await NoteManager(self.session).list_notes_by_category(category_id)

"""
NoteShelf Backend: Manager Dependencies
=======================================

What:  FastAPI dependencies that build a manager around the request's session.
How:   Depends(get_db_session) yields one session per request; both managers
       requested by a handler share it, so they share its transaction.
"""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from noteshelf.config import settings
from noteshelf.database import get_db_session
from noteshelf.schemas.common import MAX_RECORD_ID
from noteshelf.services.category_manager import CategoryManager
from noteshelf.services.note_manager import (
    NoteManager,
    allow_any_category,
    require_active_category,
)


# Path ids outside the column range can never match a row; reject them as 400
RecordId = Annotated[int, Path(ge=1, le=MAX_RECORD_ID, description="Store-generated record id")]


def get_category_manager(db: AsyncSession = Depends(get_db_session)) -> CategoryManager:
    return CategoryManager(db)


def get_note_manager(db: AsyncSession = Depends(get_db_session)) -> NoteManager:
    check = require_active_category if settings.strict_category_references else allow_any_category
    return NoteManager(db, category_check=check)

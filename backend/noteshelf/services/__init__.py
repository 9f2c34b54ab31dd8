"""
NoteShelf Backend: Managers Layer
=================================

What:  Business logic sitting between routes (HTTP) and the database.

Manager Inventory:
    - CategoryManager: category records and their soft-delete flag
    - NoteManager:     note records and the optional category reference

Managers take their AsyncSession at construction and keep no state beyond
it, so a test can build one around any session.
"""

from noteshelf.services.category_manager import CategoryManager
from noteshelf.services.note_manager import (
    NoteManager,
    allow_any_category,
    require_active_category,
)

__all__ = [
    "CategoryManager",
    "NoteManager",
    "allow_any_category",
    "require_active_category",
]

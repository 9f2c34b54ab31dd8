"""ORM models. Importing this package registers every table with Base.metadata."""

from noteshelf.models.category import Category
from noteshelf.models.note import Note

__all__ = ["Category", "Note"]

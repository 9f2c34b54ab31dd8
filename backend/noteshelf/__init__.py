"""
NoteShelf Backend: Application Package
======================================

What: Personal note-taking API. Notes, user-defined categories, and the
      optional link between them.
Who:  Imported by uvicorn (`noteshelf.main:app`), Alembic, and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Managers (Category, Note)       │  ← Validation, defaults, lookups
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Managers receive their session at construction, so each layer can be
    exercised without HTTP.
"""

__version__ = "1.0.0"

"""
NoteShelf Backend: Category Request/Response Schemas
====================================================

What:  Pydantic models defining the categories API contract.
"""

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    """Body of POST /categories. is_deleted is not accepted; new categories start active."""
    category_name: str = Field(description="Display name (not blank, at most 255 characters)")


class CategoryStatusUpdate(BaseModel):
    """Body of PUT /categories/{id}: the only mutation a category supports."""
    is_deleted: bool = Field(description="true to soft-delete, false to restore")


class CategoryResponse(BaseModel):
    id: int = Field(description="Store-generated category identifier")
    category_name: str
    is_deleted: bool = Field(description="Soft-delete flag")

    model_config = {"from_attributes": True}

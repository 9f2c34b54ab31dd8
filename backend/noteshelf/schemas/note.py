"""
NoteShelf Backend: Note Request/Response Schemas
================================================

What:  Pydantic models defining the notes API contract.
How:   FastAPI validates request bodies against these and serializes
       responses through them (OpenAPI docs are generated from them too).
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from noteshelf.schemas.common import MAX_RECORD_ID


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /notes. Both fields are optional; NoteManager fills in
    "Untitled" and "" for missing or empty values.
    """
    title: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note body")


class NoteUpdate(BaseModel):
    """
    Body of PUT /notes/{id}.

    The update replaces both fields, so both are required: a body carrying
    only one of them is rejected instead of blanking the other.
    """
    title: str = Field(description="New title (stored verbatim)")
    content: str = Field(description="New body (stored verbatim)")


class NoteCategoryUpdate(BaseModel):
    """
    Body of PUT /notes/{id}/category.

    null, 0 or an omitted field clears the link; 0 is never a store-generated id.
    """
    category_id: Optional[int] = Field(
        default=None,
        ge=1,
        le=MAX_RECORD_ID,
        validation_alias=AliasChoices("category_id", "categoryId"),
        description="Target category id, or null to remove the association",
    )

    @field_validator("category_id", mode="before")
    @classmethod
    def zero_means_none(cls, v):
        """The single-page client sends 0 for "no category"."""
        if isinstance(v, int) and v == 0:
            return None
        return v


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """A stored note as returned by every notes endpoint."""
    id: int = Field(description="Store-generated note identifier")
    title: str
    content: str
    category_id: Optional[int] = Field(
        default=None,
        description="Associated category id; may reference a soft-deleted category",
    )

    model_config = {"from_attributes": True}

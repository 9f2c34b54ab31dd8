"""
NoteShelf Backend: Notes Route Handlers
=======================================

What:  CRUD for notes plus the category association endpoints.
How:   Each handler parses the request, calls one NoteManager operation and
       returns the record; errors are formatted by the global handlers.

Route Inventory:
    GET    /notes                       list all notes
    GET    /notes/{id}                  one note (404 when missing)
    POST   /notes                       create (201)
    PUT    /notes/{id}                  replace title and content
    DELETE /notes/{id}                  hard delete, returns the deleted note
    PUT    /notes/{id}/category         set or clear the category
    PUT    /notes/{id}/remove-category  clear the category
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends

from noteshelf.routes.dependencies import RecordId, get_note_manager
from noteshelf.schemas.common import ErrorResponse
from noteshelf.schemas.note import (
    NoteCategoryUpdate,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)
from noteshelf.services.note_manager import NoteManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Notes"])

NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}
INVALID = {400: {"description": "Invalid request body", "model": ErrorResponse}}


@router.get("", response_model=List[NoteResponse], summary="List all notes")
async def list_notes(manager: NoteManager = Depends(get_note_manager)):
    return await manager.list_notes()


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses=NOT_FOUND,
    summary="Get a single note by ID",
)
async def get_note(note_id: RecordId, manager: NoteManager = Depends(get_note_manager)):
    return await manager.get_note(note_id)


@router.post(
    "",
    status_code=201,
    response_model=NoteResponse,
    responses=INVALID,
    summary="Create a note",
    description="Missing or empty fields default to title 'Untitled' and empty content.",
)
async def create_note(body: NoteCreate, manager: NoteManager = Depends(get_note_manager)):
    return await manager.create_note(title=body.title, content=body.content)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    responses={**NOT_FOUND, **INVALID},
    summary="Replace a note's title and content",
)
async def update_note(
    note_id: RecordId,
    body: NoteUpdate,
    manager: NoteManager = Depends(get_note_manager),
):
    return await manager.update_note(note_id, title=body.title, content=body.content)


@router.delete(
    "/{note_id}",
    response_model=NoteResponse,
    responses=NOT_FOUND,
    summary="Delete a note",
    description="Permanently removes the note and returns its last state.",
)
async def delete_note(note_id: RecordId, manager: NoteManager = Depends(get_note_manager)):
    return await manager.delete_note(note_id)


@router.put(
    "/{note_id}/category",
    response_model=NoteResponse,
    responses={**NOT_FOUND, **INVALID},
    summary="Assign a note to a category",
    description="A null, zero or omitted category_id (or no body at all) removes the association.",
)
async def set_note_category(
    note_id: RecordId,
    body: Optional[NoteCategoryUpdate] = None,
    manager: NoteManager = Depends(get_note_manager),
):
    category_id = body.category_id if body is not None else None
    return await manager.set_note_category(note_id, category_id)


@router.put(
    "/{note_id}/remove-category",
    response_model=NoteResponse,
    responses=NOT_FOUND,
    summary="Remove a note from its category",
)
async def remove_note_category(note_id: RecordId, manager: NoteManager = Depends(get_note_manager)):
    return await manager.clear_note_category(note_id)

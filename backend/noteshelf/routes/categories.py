"""
NoteShelf Backend: Category Route Handlers
==========================================

Route Inventory:
    GET  /categories             list (soft-deleted included unless include_deleted=false)
    GET  /categories/{id}        one category (404 when missing)
    POST /categories             create an active category (201)
    PUT  /categories/{id}        set the is_deleted flag
    GET  /categories/{id}/notes  notes associated with the category
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query

from noteshelf.routes.dependencies import RecordId, get_category_manager
from noteshelf.schemas.category import (
    CategoryCreate,
    CategoryResponse,
    CategoryStatusUpdate,
)
from noteshelf.schemas.common import ErrorResponse
from noteshelf.schemas.note import NoteResponse
from noteshelf.services.category_manager import CategoryManager

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=List[CategoryResponse], summary="List categories")
async def list_categories(
    include_deleted: bool = Query(
        default=True,
        description="Include soft-deleted categories. Pass false for the selectable set only.",
    ),
    manager: CategoryManager = Depends(get_category_manager),
):
    return await manager.list_categories(include_deleted=include_deleted)


@router.get(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={404: {"description": "Category not found", "model": ErrorResponse}},
    summary="Get a single category by ID",
)
async def get_category(
    category_id: RecordId,
    manager: CategoryManager = Depends(get_category_manager),
):
    return await manager.get_category(category_id)


@router.post(
    "",
    status_code=201,
    response_model=CategoryResponse,
    responses={400: {"description": "Blank category name", "model": ErrorResponse}},
    summary="Create a category",
)
async def create_category(
    body: CategoryCreate,
    manager: CategoryManager = Depends(get_category_manager),
):
    return await manager.create_category(body.category_name)


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    responses={
        400: {"description": "Invalid request body", "model": ErrorResponse},
        404: {"description": "Category not found", "model": ErrorResponse},
    },
    summary="Soft-delete or restore a category",
)
async def update_category_status(
    category_id: RecordId,
    body: CategoryStatusUpdate,
    manager: CategoryManager = Depends(get_category_manager),
):
    return await manager.set_category_deleted(category_id, body.is_deleted)


@router.get(
    "/{category_id}/notes",
    response_model=List[NoteResponse],
    summary="List the notes in a category",
    description="Returns an empty list for unknown categories; soft-deleted categories keep their notes.",
)
async def list_category_notes(
    category_id: RecordId,
    manager: CategoryManager = Depends(get_category_manager),
):
    return await manager.list_notes_for_category(category_id)

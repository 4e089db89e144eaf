"""
Lost item endpoints.

GET    /api/lost-items   — browse with search, category/status filters, pages
POST   /api/lost-items   — report a lost or found item
DELETE /api/delete-item  — verify an OTP and delete the caller's own item
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from dependencies import get_item_service
from schemas.dto.requests.item import (
    CreateItemRequest,
    DeleteItemRequest,
    ListItemsQuery,
)
from schemas.dto.responses.common import ErrorResponse
from schemas.dto.responses.item import (
    DeleteItemResponse,
    ItemCreatedResponse,
    ItemListResponse,
    LostItemResponse,
)
from services.item_service import ItemService

router = APIRouter(prefix="/api", tags=["items"])


@router.get(
    "/lost-items",
    response_model=ItemListResponse,
    responses={400: {"model": ErrorResponse}},
)
async def list_items(
    query: Annotated[ListItemsQuery, Query()],
    item_service: ItemService = Depends(get_item_service),
) -> ItemListResponse:
    items, pagination = await item_service.list_items(query)
    return ItemListResponse(
        data=[LostItemResponse.from_doc(item) for item in items],
        pagination=pagination,
    )


@router.post(
    "/lost-items",
    status_code=201,
    response_model=ItemCreatedResponse,
    responses={400: {"model": ErrorResponse}},
)
async def create_item(
    body: CreateItemRequest,
    item_service: ItemService = Depends(get_item_service),
) -> ItemCreatedResponse:
    item = await item_service.create_item(body)
    return ItemCreatedResponse(data=LostItemResponse.from_doc(item))


@router.delete(
    "/delete-item",
    response_model=DeleteItemResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def delete_item(
    body: DeleteItemRequest,
    item_service: ItemService = Depends(get_item_service),
) -> DeleteItemResponse:
    deleted_id = await item_service.delete_item(body.item_id, body.email, body.code)
    return DeleteItemResponse(deleted_id=deleted_id)

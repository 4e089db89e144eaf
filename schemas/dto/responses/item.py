"""
Response DTOs for lost-item endpoints.

LostItemResponse    — one item, camelCase keys as the web client expects
ItemListResponse    — GET /api/lost-items  (200)
ItemCreatedResponse — POST /api/lost-items  (201)
DeleteItemResponse  — DELETE /api/delete-item  (200)
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from schemas.models.item import LostItemDoc


class LostItemResponse(BaseModel):
    """A single item as rendered to the client."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    id: str
    title: str
    description: str
    category: str
    location: str
    date: datetime
    contact_name: str
    contact_phone: str
    contact_email: str = ""
    image: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_doc(cls, doc: LostItemDoc) -> "LostItemResponse":
        data = doc.model_dump(exclude={"id"})
        return cls(id=str(doc.id), **data)


class Pagination(BaseModel):
    """Pagination metadata for item listings."""

    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    pages: int


class ItemListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    data: list[LostItemResponse]
    pagination: Pagination


class ItemCreatedResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    data: LostItemResponse
    message: str = "Item reported successfully"


class DeleteItemResponse(BaseModel):
    """Response body after a verified, owner-scoped delete."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    ok: bool = True
    deleted_id: str
    message: str = "Item deleted successfully"

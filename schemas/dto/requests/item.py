"""
Request DTOs for lost-item endpoints.

ListItemsQuery     — GET /api/lost-items
CreateItemRequest  — POST /api/lost-items
DeleteItemRequest  — DELETE /api/delete-item

Both snake_case and the camelCase keys sent by the web client are accepted.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from schemas.models.item import ITEM_CATEGORIES, ItemStatus
from shared.validators import is_valid_contact_email, is_valid_phone, normalize_email

REQUIRED_ITEM_FIELDS = (
    "title",
    "description",
    "category",
    "location",
    "contact_name",
    "contact_phone",
    "status",
)


class ListItemsQuery(BaseModel):
    """Query parameters for browsing items.

    ``all`` for category or status disables that filter.
    """

    model_config = ConfigDict(populate_by_name=True)

    search: Optional[str] = None
    category: str = "all"
    status: str = "all"
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class CreateItemRequest(BaseModel):
    """Request body for reporting a lost or found item.

    Every field is optional here so ItemService can report all missing
    required fields at once; shape constraints are enforced per field.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    title: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    category: Optional[str] = None
    location: Optional[str] = Field(default=None, max_length=100)
    date: Optional[datetime] = None
    contact_name: Optional[str] = Field(
        default=None,
        max_length=50,
        validation_alias=AliasChoices("contact_name", "contactName"),
    )
    contact_phone: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("contact_phone", "contactPhone")
    )
    contact_email: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("contact_email", "contactEmail")
    )
    image: Optional[str] = None
    status: Optional[ItemStatus] = None

    @field_validator("category", mode="after")
    @classmethod
    def _validate_category(cls, v: Optional[str]) -> Optional[str]:
        if v and v not in ITEM_CATEGORIES:
            raise ValueError(f"category must be one of: {', '.join(ITEM_CATEGORIES)}")
        return v

    @field_validator("contact_phone", mode="after")
    @classmethod
    def _validate_phone(cls, v: Optional[str]) -> Optional[str]:
        if v and not is_valid_phone(v):
            raise ValueError("Please enter a valid Indian phone number")
        return v

    @field_validator("contact_email", mode="after")
    @classmethod
    def _validate_email(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return v
        v = normalize_email(v)
        if not is_valid_contact_email(v):
            raise ValueError("Please enter a valid email")
        return v

    def missing_fields(self) -> list[str]:
        """Return the required fields that are absent or blank."""
        return [name for name in REQUIRED_ITEM_FIELDS if not getattr(self, name)]


class DeleteItemRequest(BaseModel):
    """Request body for DELETE /api/delete-item."""

    model_config = ConfigDict(populate_by_name=True)

    item_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("item_id", "itemId")
    )
    email: Optional[str] = None
    code: Optional[str] = Field(default=None, validation_alias=AliasChoices("code", "otp"))

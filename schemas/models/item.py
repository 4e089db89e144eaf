"""
Lost item document model.

Maps to the `lost-items` MongoDB collection.

contact_email doubles as the owner field: deleting an item requires a
verified OTP for that exact address.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from schemas.models.base import MongoBaseModel

ITEM_CATEGORIES = (
    "Electronics",
    "Books",
    "Clothing",
    "Accessories",
    "Documents",
    "Sports Equipment",
    "Other",
)

ItemStatus = Literal["lost", "found"]

PLACEHOLDER_IMAGE = "/placeholder.svg?height=200&width=300"


class LostItemDoc(MongoBaseModel):
    """Document model for the `lost-items` collection."""

    title: str
    description: str
    category: str
    location: str
    date: datetime
    contact_name: str
    contact_phone: str
    contact_email: str = ""
    image: str = PLACEHOLDER_IMAGE
    status: ItemStatus = "lost"
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

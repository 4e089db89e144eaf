"""
Repository for the `lost-items` collection.

Listing supports MongoDB text search plus equality filters on category and
status. Deletion is owner-scoped: the filter matches both _id and
contact_email, so an item owned by someone else is indistinguishable from a
missing one.
"""

from __future__ import annotations

from typing import Optional

from pymongo import ASCENDING, DESCENDING, TEXT
from pymongo.asynchronous.collection import AsyncCollection

from schemas.models.base import parse_object_id
from schemas.models.item import LostItemDoc

ITEMS_COLLECTION = "lost-items"

ALL = "all"


def build_item_filter(
    search: Optional[str] = None,
    category: str = ALL,
    status: str = ALL,
) -> dict:
    """Translate list parameters into a MongoDB query document."""
    query: dict = {}
    if search:
        query["$text"] = {"$search": search}
    if category and category != ALL:
        query["category"] = category
    if status and status != ALL:
        query["status"] = status
    return query


class ItemRepository:
    def __init__(self, collection: AsyncCollection) -> None:
        self._col = collection

    async def ensure_indexes(self) -> None:
        await self._col.create_index(
            [("title", TEXT), ("description", TEXT), ("location", TEXT)]
        )
        await self._col.create_index([("category", ASCENDING)])
        await self._col.create_index([("status", ASCENDING)])
        await self._col.create_index([("created_at", DESCENDING)])
        await self._col.create_index([("contact_email", ASCENDING)])

    async def insert(self, item: LostItemDoc) -> LostItemDoc:
        result = await self._col.insert_one(item.to_mongo())
        return item.model_copy(update={"id": result.inserted_id})

    async def find_page(self, query: dict, skip: int, limit: int) -> list[LostItemDoc]:
        cursor = (
            self._col.find(query)
            .sort("created_at", DESCENDING)
            .skip(skip)
            .limit(limit)
        )
        return [LostItemDoc.from_mongo(doc) async for doc in cursor]

    async def count(self, query: dict) -> int:
        return await self._col.count_documents(query)

    async def delete_owned(self, item_id: str, owner_email: str) -> Optional[LostItemDoc]:
        """Delete the item only when *owner_email* is its contact email.

        Returns the deleted document, or None when nothing matched (including
        a malformed *item_id*).
        """
        oid = parse_object_id(item_id)
        if oid is None:
            return None
        doc = await self._col.find_one_and_delete(
            {"_id": oid, "contact_email": owner_email}
        )
        return LostItemDoc.from_mongo(doc)

"""
Repository for the `otps` collection.

The two operations the OTP lifecycle relies on are both single MongoDB
commands: issue is an upsert keyed by email, and consume is
find_one_and_delete, which reads and removes the record atomically so two
concurrent verifications can never both observe the same code.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pymongo import ASCENDING
from pymongo.asynchronous.collection import AsyncCollection

from schemas.models.otp import OneTimeCodeDoc
from shared.logging import get_logger

log = get_logger(__name__)

OTP_COLLECTION = "otps"


class OtpRepository:
    def __init__(self, collection: AsyncCollection) -> None:
        self._col = collection

    async def ensure_indexes(self) -> None:
        await self._col.create_index([("email", ASCENDING)], unique=True)
        # expireAfterSeconds=0 reaps each document as soon as expires_at passes
        await self._col.create_index(
            [("expires_at", ASCENDING)], expireAfterSeconds=0
        )

    async def upsert(
        self, email: str, code_hash: str, expires_at: datetime, issued_at: datetime
    ) -> None:
        """Store the pending code for *email*, replacing any previous one."""
        await self._col.update_one(
            {"email": email},
            {
                "$set": {
                    "code_hash": code_hash,
                    "expires_at": expires_at,
                    "issued_at": issued_at,
                }
            },
            upsert=True,
        )

    async def consume(self, email: str) -> Optional[OneTimeCodeDoc]:
        """Atomically fetch and delete the pending code for *email*."""
        doc = await self._col.find_one_and_delete({"email": email})
        return OneTimeCodeDoc.from_mongo(doc)

    async def discard(self, email: str, code_hash: str) -> bool:
        """Delete the pending code for *email* only if it is still *code_hash*.

        A newer issuance for the same address is left untouched.
        """
        result = await self._col.delete_one({"email": email, "code_hash": code_hash})
        return result.deleted_count > 0

"""
One-time code document model.

Maps to the `otps` MongoDB collection.

One document per email (unique index). code_hash stores SHA-256(code); the
plain code is never stored. A TTL index on expires_at lets MongoDB reap
unconsumed codes without any application involvement.
"""

from __future__ import annotations

from datetime import datetime

from schemas.models.base import MongoBaseModel


class OneTimeCodeDoc(MongoBaseModel):
    """Document model for the `otps` collection."""

    email: str
    code_hash: str
    expires_at: datetime
    issued_at: datetime

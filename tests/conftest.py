"""
Shared test doubles.

In-memory stand-ins for the repositories and the email provider, exposing
the same async methods the services call. A controllable clock lets tests
step past OTP expiry without sleeping.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from bson import ObjectId

from config import OtpSettings
from schemas.models.base import parse_object_id
from schemas.models.item import LostItemDoc
from schemas.models.otp import OneTimeCodeDoc
from services.item_service import ItemService
from services.otp_service import OtpService


class FakeClock:
    def __init__(self, start: Optional[datetime] = None) -> None:
        self.now = start or datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@dataclass
class SentOtp:
    email: str
    code: str
    expires_in_minutes: int


class FakeEmailProvider:
    def __init__(self, succeed: bool = True) -> None:
        self.succeed = succeed
        self.sent: list[SentOtp] = []

    async def send_otp_email(self, email: str, otp_code: str, expires_in_minutes: int) -> bool:
        if not self.succeed:
            return False
        self.sent.append(SentOtp(email, otp_code, expires_in_minutes))
        return True

    @property
    def last_code(self) -> str:
        return self.sent[-1].code


class InMemoryOtpRepository:
    def __init__(self) -> None:
        self.records: dict[str, OneTimeCodeDoc] = {}

    async def upsert(self, email, code_hash, expires_at, issued_at) -> None:
        self.records[email] = OneTimeCodeDoc(
            email=email, code_hash=code_hash, expires_at=expires_at, issued_at=issued_at
        )

    async def consume(self, email):
        return self.records.pop(email, None)

    async def discard(self, email, code_hash) -> bool:
        record = self.records.get(email)
        if record is None or record.code_hash != code_hash:
            return False
        del self.records[email]
        return True

    def reap(self, now: datetime) -> None:
        """Mimic the TTL monitor removing expired records."""
        self.records = {k: v for k, v in self.records.items() if v.expires_at >= now}


class InMemoryItemRepository:
    def __init__(self) -> None:
        self.items: dict[ObjectId, LostItemDoc] = {}

    def add(self, **fields) -> LostItemDoc:
        base = dict(
            title="Blue backpack",
            description="Left near the library entrance",
            category="Accessories",
            location="Main library",
            date=datetime(2026, 1, 10, tzinfo=timezone.utc),
            contact_name="Asha",
            contact_phone="+91 9876543210",
            contact_email="a@x.edu",
            status="lost",
            created_at=datetime(2026, 1, 10, tzinfo=timezone.utc),
        )
        base.update(fields)
        doc = LostItemDoc(id=ObjectId(), **base)
        self.items[doc.id] = doc
        return doc

    async def insert(self, item: LostItemDoc) -> LostItemDoc:
        saved = item.model_copy(update={"id": ObjectId()})
        self.items[saved.id] = saved
        return saved

    def _matches(self, doc: LostItemDoc, query: dict) -> bool:
        return all(getattr(doc, k) == v for k, v in query.items() if not k.startswith("$"))

    async def find_page(self, query, skip, limit):
        found = [d for d in self.items.values() if self._matches(d, query)]
        found.sort(key=lambda d: d.created_at, reverse=True)
        return found[skip : skip + limit]

    async def count(self, query) -> int:
        return sum(1 for d in self.items.values() if self._matches(d, query))

    async def delete_owned(self, item_id, owner_email):
        oid = parse_object_id(item_id)
        doc = self.items.get(oid) if oid is not None else None
        if doc is None or doc.contact_email != owner_email:
            return None
        return self.items.pop(oid)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def email_provider():
    return FakeEmailProvider()


@pytest.fixture
def otp_repo():
    return InMemoryOtpRepository()


@pytest.fixture
def item_repo():
    return InMemoryItemRepository()


@pytest.fixture
def otp_service(otp_repo, email_provider, clock):
    return OtpService(otp_repo, email_provider, OtpSettings(otp_ttl_seconds=300), clock=clock)


@pytest.fixture
def item_service(item_repo, otp_service, clock):
    return ItemService(item_repo, otp_service, clock=clock)

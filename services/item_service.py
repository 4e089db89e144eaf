"""
Lost item catalogue: browse, report, and OTP-gated deletion.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Callable, Optional

from errors import NotAuthorizedError, ValidationError
from repositories.item_repository import ItemRepository, build_item_filter
from schemas.dto.requests.item import CreateItemRequest, ListItemsQuery
from schemas.dto.responses.item import Pagination
from schemas.models.item import PLACEHOLDER_IMAGE, LostItemDoc
from services.otp_service import OtpService
from shared.datetime_utils import utcnow
from shared.logging import get_logger, hash_email, log_with_context
from shared.validators import normalize_email

log = get_logger(__name__)


class ItemService:
    def __init__(
        self,
        item_repo: ItemRepository,
        otp_service: OtpService,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._repo = item_repo
        self._otp = otp_service
        self._clock = clock

    async def list_items(
        self, query: ListItemsQuery
    ) -> tuple[list[LostItemDoc], Pagination]:
        """Return one page of items, newest first, with pagination metadata."""
        mongo_query = build_item_filter(query.search, query.category, query.status)
        skip = (query.page - 1) * query.limit
        items = await self._repo.find_page(mongo_query, skip, query.limit)
        total = await self._repo.count(mongo_query)
        pagination = Pagination(
            page=query.page,
            limit=query.limit,
            total=total,
            pages=math.ceil(total / query.limit),
        )
        return items, pagination

    async def create_item(self, request: CreateItemRequest) -> LostItemDoc:
        """Persist a new report.

        Raises:
            ValidationError: one or more required fields are missing; the
                names are listed in ``details["missing_fields"]``.
        """
        missing = request.missing_fields()
        if missing:
            raise ValidationError(
                "Missing required fields", details={"missing_fields": missing}
            )

        now = self._clock()
        doc = LostItemDoc(
            title=request.title,
            description=request.description,
            category=request.category,
            location=request.location,
            date=request.date or now,
            contact_name=request.contact_name,
            contact_phone=request.contact_phone,
            contact_email=request.contact_email or "",
            image=request.image or PLACEHOLDER_IMAGE,
            status=request.status,
            created_at=now,
            updated_at=now,
        )
        saved = await self._repo.insert(doc)
        log.info(
            "item_created",
            item_id=str(saved.id),
            category=saved.category,
            status=saved.status,
        )
        return saved

    async def delete_item(
        self, item_id: Optional[str], email: Optional[str], code: Optional[str]
    ) -> str:
        """Verify *code* for *email*, then delete the item that email owns.

        The item is only touched after verification succeeds. Returns the id
        of the deleted item.

        Raises:
            ValidationError: any of the three inputs is missing.
            OtpError: propagated unchanged from OtpService.verify.
            NotAuthorizedError: no item with this id is owned by *email*.
        """
        if not item_id or not email or not code:
            raise ValidationError("Item ID, OTP, and email are required")

        await self._otp.verify(email, code)

        owner = normalize_email(email)
        bound = log_with_context(log, item_id=item_id, email=hash_email(owner))
        deleted = await self._repo.delete_owned(item_id, owner)
        if deleted is None:
            bound.warning("item_delete_not_authorized")
            raise NotAuthorizedError(
                "Item not found or you are not authorized to delete it"
            )

        bound.info("item_deleted")
        return str(deleted.id)

"""
OTP issuance and verification.

OtpService is the single authority over one-time codes: the standalone
verify endpoint and the item-deletion flow both call verify(), which
consumes the pending code on every outcome. A wrong guess therefore burns
the code and the user must request a new one.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, Optional

from config import OtpSettings
from errors import (
    DeliveryError,
    OtpExpiredError,
    OtpMismatchError,
    OtpNotFoundError,
    ValidationError,
)
from infrastructure.email.protocol import EmailProvider
from repositories.otp_repository import OtpRepository
from shared.crypto import hash_token, token_matches
from shared.datetime_utils import is_expired, utcnow
from shared.generators import generate_otp_code
from shared.logging import get_logger, hash_email
from shared.validators import is_valid_email, normalize_email

log = get_logger(__name__)


class OtpService:
    def __init__(
        self,
        otp_repo: OtpRepository,
        email_provider: EmailProvider,
        settings: Optional[OtpSettings] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._repo = otp_repo
        self._email = email_provider
        self._settings = settings or OtpSettings()
        self._clock = clock

    @property
    def expires_in_minutes(self) -> int:
        return max(1, self._settings.otp_ttl_seconds // 60)

    async def issue(self, email: Optional[str]) -> None:
        """Generate a code for *email*, store it, and mail it.

        Any code previously pending for the address is replaced. If the mail
        cannot be delivered the new code is discarded (unless a later
        issuance has already replaced it) and DeliveryError is raised.

        Raises:
            ValidationError: email missing or malformed.
            DeliveryError: the email provider reported a failure.
        """
        email = normalize_email(email)
        if not email:
            raise ValidationError("Email is required", field="email")
        if not is_valid_email(email):
            raise ValidationError("Email is invalid", field="email")

        code = generate_otp_code()
        code_hash = hash_token(code)
        issued_at = self._clock()
        expires_at = issued_at + timedelta(seconds=self._settings.otp_ttl_seconds)
        await self._repo.upsert(email, code_hash, expires_at, issued_at)

        sent = await self._email.send_otp_email(email, code, self.expires_in_minutes)
        if not sent:
            await self._repo.discard(email, code_hash)
            log.error("otp_delivery_failed", email=hash_email(email))
            raise DeliveryError("Failed to send OTP")

        log.info(
            "otp_issued",
            email=hash_email(email),
            expires_at=expires_at.isoformat(),
        )

    async def verify(self, email: Optional[str], code: Optional[str]) -> None:
        """Consume the pending code for *email* and check it against *code*.

        The stored record is removed before any check runs, so it is gone
        whether verification succeeds or fails.

        Raises:
            ValidationError: email or code missing.
            OtpNotFoundError: nothing pending (never issued, consumed or reaped).
            OtpExpiredError: the record outlived expires_at before reaping.
            OtpMismatchError: the code is wrong.
        """
        email = normalize_email(email)
        if not email or not code:
            raise ValidationError("Email and OTP are required")

        record = await self._repo.consume(email)
        if record is None:
            log.info("otp_verify_failed", email=hash_email(email), kind="not_found")
            raise OtpNotFoundError()

        if is_expired(record.expires_at, self._clock()):
            log.info("otp_verify_failed", email=hash_email(email), kind="expired")
            raise OtpExpiredError()

        if not token_matches(code, record.code_hash):
            log.warning("otp_verify_failed", email=hash_email(email), kind="mismatch")
            raise OtpMismatchError()

        log.info("otp_verified", email=hash_email(email))

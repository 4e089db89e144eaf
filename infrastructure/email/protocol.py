"""EmailProvider protocol — services depend on this, not the concrete implementation."""

from typing import Protocol


class EmailProvider(Protocol):
    async def send_otp_email(
        self, email: str, otp_code: str, expires_in_minutes: int
    ) -> bool: ...

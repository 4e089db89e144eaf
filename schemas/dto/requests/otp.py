"""
Request DTOs for the OTP endpoints.

SendOtpRequest    — POST /api/send-otp
VerifyOtpRequest  — POST /api/verify-otp

Fields are optional at the schema level: a missing value is a
ValidationError raised by OtpService, so the response keeps the
``{ok: false, error}`` shape with a 400 status.
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SendOtpRequest(BaseModel):
    """Request body for POST /api/send-otp."""

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None


class VerifyOtpRequest(BaseModel):
    """Request body for POST /api/verify-otp.

    ``code`` is the 6-digit OTP; ``otp`` is accepted as an alias.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = None
    code: Optional[str] = Field(default=None, validation_alias=AliasChoices("code", "otp"))

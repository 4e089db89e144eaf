"""
OTP endpoints.

POST /api/send-otp    — issue a code for an email address and mail it
POST /api/verify-otp  — one-shot check; the code is consumed either way

Deleting an item does not go through /api/verify-otp: DELETE
/api/delete-item verifies and deletes in one call.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from dependencies import get_otp_service
from schemas.dto.requests.otp import SendOtpRequest, VerifyOtpRequest
from schemas.dto.responses.common import ErrorResponse, MessageResponse
from services.otp_service import OtpService

router = APIRouter(prefix="/api", tags=["otp"])


@router.post(
    "/send-otp",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def send_otp(
    body: SendOtpRequest,
    otp_service: OtpService = Depends(get_otp_service),
) -> MessageResponse:
    await otp_service.issue(body.email)
    return MessageResponse(ok=True, message="OTP sent successfully")


@router.post(
    "/verify-otp",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}},
)
async def verify_otp(
    body: VerifyOtpRequest,
    otp_service: OtpService = Depends(get_otp_service),
) -> MessageResponse:
    await otp_service.verify(body.email, body.code)
    return MessageResponse(ok=True, message="OTP verified successfully")

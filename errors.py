"""
Application error hierarchy and FastAPI exception handlers.

AppError is the base for all typed errors. The global exception handler
converts AppError subclasses to consistent JSON responses of the form
``{"ok": false, "error": ..., "code": ...}``.

The OTP failures form a closed set under OtpError; each subclass fixes its
own ``kind`` so callers can branch on it without parsing messages.

Non-AppError exceptions bubble up as 500s (with Sentry reporting in production).
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.logging import get_logger

log = get_logger(__name__)


class AppError(Exception):
    """Base application error. All typed errors inherit from this."""

    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"ok": False, "error": self.message, "code": self.error_code}
        if self.field is not None:
            payload["field"] = self.field
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ValidationError(AppError):
    status_code = 400
    error_code = "validation_error"


class OtpError(AppError):
    """A presented code was rejected. Recovery requires a fresh issuance."""

    status_code = 400
    error_code = "otp_invalid"
    kind: str = "invalid"
    default_message: str = "Invalid OTP"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class OtpNotFoundError(OtpError):
    error_code = "otp_not_found"
    kind = "not_found"
    default_message = "OTP not found or expired"


class OtpExpiredError(OtpError):
    error_code = "otp_expired"
    kind = "expired"
    default_message = "OTP has expired"


class OtpMismatchError(OtpError):
    error_code = "otp_mismatch"
    kind = "mismatch"
    default_message = "Invalid OTP"


class NotAuthorizedError(AppError):
    # 404 rather than 403: a foreign item and a missing item look the same
    status_code = 404
    error_code = "not_authorized"


class DeliveryError(AppError):
    status_code = 500
    error_code = "delivery_failed"


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the FastAPI app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        err = ValidationError(
            "Validation failed", details=jsonable_encoder(exc.errors())
        )
        return JSONResponse(status_code=err.status_code, content=err.to_dict())

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        # Sentry integration: if sentry_sdk is initialized it will auto-capture
        # unhandled exceptions before this handler fires.
        log.error(
            "unhandled_exception",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "ok": False,
                "error": "An internal server error occurred.",
                "code": "internal_error",
            },
        )

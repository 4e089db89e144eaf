"""
FastAPI dependency providers.

Collaborators are built once in the application lifespan and stored on
app.state; these providers hand them to route handlers via Depends().
"""

from __future__ import annotations

from fastapi import Request

from services.item_service import ItemService
from services.otp_service import OtpService


def get_otp_service(request: Request) -> OtpService:
    return request.app.state.otp_service


def get_item_service(request: Request) -> ItemService:
    return request.app.state.item_service

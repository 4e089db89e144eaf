"""
FastAPI application factory.
create_app() is the single entry point for building the app.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.asynchronous.mongo_client import AsyncMongoClient

from config import AppSettings
from errors import register_error_handlers
from infrastructure.email.zeptomail import ZeptoMailProvider
from infrastructure.http_client import HttpClient
from repositories.item_repository import ITEMS_COLLECTION, ItemRepository
from repositories.otp_repository import OTP_COLLECTION, OtpRepository
from routes.health_routes import router as health_router
from routes.item_routes import router as item_router
from routes.otp_routes import router as otp_router
from services.item_service import ItemService
from services.otp_service import OtpService
from shared.logging import get_logger, setup_logging

log = get_logger(__name__)


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Create and return a fully configured FastAPI application."""
    if settings is None:
        settings = AppSettings()

    setup_logging(settings.logging, env=settings.env)

    # Initialise Sentry before anything else so it captures startup errors
    if settings.sentry.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry.sentry_dsn,
            send_default_pii=settings.sentry.sentry_send_pii,
            traces_sample_rate=settings.sentry.sentry_traces_sample_rate,
            environment=settings.env,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # ── Startup ──────────────────────────────────────────────────────────
        mongo_client: AsyncMongoClient = AsyncMongoClient(
            settings.db.mongodb_uri, tz_aware=True
        )
        db = mongo_client[settings.db.db_name]
        app.state.mongo_client = mongo_client
        app.state.db = db
        app.state.settings = settings

        otp_repo = OtpRepository(db[OTP_COLLECTION])
        item_repo = ItemRepository(db[ITEMS_COLLECTION])
        await otp_repo.ensure_indexes()
        await item_repo.ensure_indexes()

        email_http = HttpClient(timeout=settings.email.email_timeout_seconds)
        email_provider = ZeptoMailProvider(
            settings=settings.email,
            http_client=email_http,
            app_name=settings.email.zepto_from_name,
        )

        otp_service = OtpService(otp_repo, email_provider, settings.otp)
        app.state.otp_service = otp_service
        app.state.item_service = ItemService(item_repo, otp_service)

        log.info("app_started", db_name=settings.db.db_name, env=settings.env)

        yield

        # ── Shutdown ─────────────────────────────────────────────────────────
        await email_http.aclose()
        await mongo_client.close()
        log.info("app_stopped")

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url=settings.docs_url,
        redoc_url=None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(otp_router)
    app.include_router(item_router)

    return app

"""ZeptoMail implementation of EmailProvider.

Sends transactional mail through the ZeptoMail REST API using the shared
HttpClient; message bodies are rendered from Jinja2 templates.
"""

import os
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from config import EmailSettings
from infrastructure.http_client import HttpClient
from shared.logging import get_logger, hash_email

log = get_logger(__name__)

_ZEPTO_API_URL = "https://api.zeptomail.in/v1.1/email"
_DEFAULT_TEMPLATE_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
    "templates",
    "emails",
)


class ZeptoMailProvider:
    def __init__(
        self,
        settings: EmailSettings,
        http_client: HttpClient,
        app_name: str = "Lost & Found System",
        template_dir: str = _DEFAULT_TEMPLATE_DIR,
    ) -> None:
        self._settings = settings
        self._http = http_client
        self._app_name = app_name
        self._jinja = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html", "xml"]),
        )

    async def _send(
        self,
        to_email: str,
        subject: str,
        html_body: str,
        text_body: Optional[str] = None,
    ) -> bool:
        if not self._settings.zepto_api_token:
            log.error("zepto_mail_send_failed", reason="token_not_configured")
            return False

        payload: dict = {
            "from": {
                "address": self._settings.zepto_from_email,
                "name": self._settings.zepto_from_name,
            },
            "to": [{"email_address": {"address": to_email, "name": to_email}}],
            "subject": subject,
            "htmlbody": html_body,
        }
        if text_body:
            payload["textbody"] = text_body

        token = self._settings.zepto_api_token
        if not token.startswith("Zoho-enczapikey "):
            token = f"Zoho-enczapikey {token}"

        headers = {"Authorization": token, "Content-Type": "application/json"}

        try:
            response = await self._http.post(_ZEPTO_API_URL, json=payload, headers=headers)
        except Exception as e:
            log.error(
                "email_send_error",
                to_email=hash_email(to_email),
                subject=subject,
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

        if response.status_code in (200, 201, 202):
            log.info("email_sent_success", to_email=hash_email(to_email), subject=subject)
            return True
        log.error(
            "email_sent_failed",
            to_email=hash_email(to_email),
            subject=subject,
            status_code=response.status_code,
            response=response.text[:200],
        )
        return False

    async def send_otp_email(
        self, email: str, otp_code: str, expires_in_minutes: int
    ) -> bool:
        subject = "Your OTP for Verification"
        template = self._jinja.get_template("otp.html")
        html_body = template.render(
            otp_code=otp_code,
            expires_in_minutes=expires_in_minutes,
            app_name=self._app_name,
        )
        text_body = (
            f"{self._app_name}\n\n"
            f"Your OTP for verification is: {otp_code}\n\n"
            f"This OTP will expire in {expires_in_minutes} minutes.\n\n"
            f"If you didn't request this, please ignore this email."
        )
        return await self._send(email, subject, html_body, text_body)

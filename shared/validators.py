"""
Input validators — framework-agnostic, pure functions.
"""

from __future__ import annotations

import re
from typing import Optional

_EMAIL_RE = re.compile(r"^\S+@\S+\.\S+$")
_CONTACT_EMAIL_RE = re.compile(r"^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$")
_PHONE_RE = re.compile(r"^\+91\s?\d{10}$")


def normalize_email(email: Optional[str]) -> str:
    """Trim and lowercase *email*. ``None`` becomes the empty string."""
    return (email or "").strip().lower()


def is_valid_email(email: str) -> bool:
    """Loose shape check used for OTP addresses: ``something@host.tld``."""
    return bool(_EMAIL_RE.match(email))


def is_valid_contact_email(email: str) -> bool:
    """Stricter check applied to the contact email stored on an item."""
    return bool(_CONTACT_EMAIL_RE.match(email))


def is_valid_phone(phone: str) -> bool:
    """Return True for Indian mobile numbers written as ``+91`` plus 10 digits."""
    return bool(_PHONE_RE.match(phone))

"""
Cryptographic helpers for one-time codes.

OTP codes are stored as SHA-256 digests and compared in constant time.
"""

from __future__ import annotations

import hashlib
import hmac


def hash_token(token: str) -> str:
    """Return the hex-encoded SHA-256 digest of *token*.

    Used to hash OTP codes before storing them in the database so the
    plaintext is never persisted.

    Returns:
        64-character lowercase hex string.
    """
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def token_matches(token: str, token_hash: str) -> bool:
    """Return True if *token* hashes to *token_hash* (constant-time compare)."""
    return hmac.compare_digest(hash_token(token), token_hash)

"""
Random code generators — pure, side-effect-free functions.

OTP codes come from the ``secrets`` module; predictability of a code is a
security property, so the system PRNG is never used here.
"""

from __future__ import annotations

import secrets


def generate_otp_code(length: int = 6) -> str:
    """Generate a cryptographically secure numeric OTP without a leading zero.

    The code is drawn uniformly from ``10**(length-1)`` to ``10**length - 1``
    inclusive, so a 6-digit code lies in 100000–999999.

    Args:
        length: Number of digits (default 6).

    Returns:
        Fixed-width string of decimal digits.
    """
    low = 10 ** (length - 1)
    high = 10**length
    return str(low + secrets.randbelow(high - low))

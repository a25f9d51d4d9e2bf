"""
Utility helpers and defaults for otpkit.
"""

import base64
import binascii
import re
from typing import Optional

from otpkit.core.errors import SecretDecodeError

# ── Defaults ──────────────────────────────────────────────────────────────────

DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30       # seconds
MAX_DIGITS = 10           # truncated codes are < 2**31 < 10**10
MAX_COUNTER = 2**64 - 1   # counters are serialised as 8 big-endian bytes

_UNSIGNED_RE = re.compile(r"[0-9]+")


# ── Base32 ────────────────────────────────────────────────────────────────────

def normalize_secret(secret: str) -> str:
    """
    Normalise a base32 secret: strip spaces, uppercase, add padding.

    Args:
        secret: Raw user-supplied secret string.

    Returns:
        Uppercase base32 string with correct padding.

    Raises:
        SecretDecodeError: If the string contains invalid base32 characters.
    """
    secret = secret.strip().upper().replace(" ", "").replace("-", "").rstrip("=")
    # Base32 alphabet: A-Z and 2-7
    if not re.fullmatch(r"[A-Z2-7]+", secret):
        raise SecretDecodeError("Secret contains invalid base32 characters.")
    # Pad to multiple of 8
    pad = (8 - len(secret) % 8) % 8
    return secret + "=" * pad


def decode_secret(secret: str) -> bytes:
    """
    Decode a base32-encoded secret string (RFC 4648, padding optional).

    Args:
        secret: Base32 secret (spaces and dashes are stripped).

    Returns:
        Raw bytes.

    Raises:
        SecretDecodeError: On invalid base32 input.
    """
    try:
        return base64.b32decode(normalize_secret(secret))
    except binascii.Error as exc:
        raise SecretDecodeError(f"Invalid base32 secret: {exc}") from exc


def encode_secret(raw: bytes) -> str:
    """Encode raw bytes as a base32 string (no padding)."""
    return base64.b32encode(raw).decode("ascii").rstrip("=")


# ── Validation ────────────────────────────────────────────────────────────────

def validate_digits(digits: int) -> None:
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise ValueError("Digits must be an integer.")
    if digits < 1 or digits > MAX_DIGITS:
        raise ValueError(f"Digits must be between 1 and {MAX_DIGITS}.")


def validate_period(period: int) -> None:
    if isinstance(period, bool) or not isinstance(period, int):
        raise ValueError("Period must be an integer.")
    if period < 1:
        raise ValueError("Period must be at least 1 second.")


def validate_counter(counter: int) -> None:
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise ValueError("Counter must be an integer.")
    if counter < 0 or counter > MAX_COUNTER:
        raise ValueError(f"Counter must be between 0 and {MAX_COUNTER}.")


def parse_unsigned(text: str, maximum: int) -> Optional[int]:
    """
    Parse a plain ASCII decimal string.

    Returns:
        The value, or None if ``text`` is not a decimal string or the value
        exceeds ``maximum``.
    """
    if not _UNSIGNED_RE.fullmatch(text):
        return None
    # Bound the length before int(), which rejects very long strings
    stripped = text.lstrip("0") or "0"
    if len(stripped) > len(str(maximum)):
        return None
    value = int(stripped)
    if value > maximum:
        return None
    return value

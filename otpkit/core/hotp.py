"""
HOTP (HMAC-based One-Time Password) implementation following RFC 4226.
"""

import struct
from dataclasses import dataclass, field

from otpkit.core.crypto import DigestKind, constant_time_compare, keyed_hash
from otpkit.core.result import OTPResult
from otpkit.core.utils import (
    DEFAULT_DIGITS,
    decode_secret,
    validate_counter,
    validate_digits,
)


def truncate(hash_output: bytes, digits: int) -> int:
    """
    Dynamic truncation (RFC 4226 §5.3).

    Args:
        hash_output: Keyed-hash output (at least 20 bytes).
        digits:      Number of decimal digits to keep.

    Returns:
        The code, bounded below ``10 ** digits``.
    """
    offset = hash_output[-1] & 0x0F
    code = (
        (hash_output[offset] & 0x7F) << 24
        | (hash_output[offset + 1] & 0xFF) << 16
        | (hash_output[offset + 2] & 0xFF) << 8
        | (hash_output[offset + 3] & 0xFF)
    )
    return code % (10**digits)


def hotp_value(secret: bytes, counter: int, digits: int, digest: DigestKind) -> OTPResult:
    """
    Core HOTP computation shared by HOTP and TOTP.

    Args:
        secret:  Raw secret bytes.
        counter: Counter value, serialised as 8 big-endian bytes.
        digits:  Number of OTP digits.
        digest:  HMAC algorithm.

    Raises:
        InvalidSecret: If the keyed hash rejects ``secret``.
    """
    msg = struct.pack(">Q", counter)
    mac = keyed_hash(secret, msg, digest)
    return OTPResult(digits, truncate(mac, digits))


@dataclass(frozen=True)
class HOTP:
    """
    Counter-based OTP generator.

    The generator holds no counter: callers pass the counter they track to
    :meth:`generate`. HOTP is always HMAC-SHA1.
    """

    secret: bytes = field(repr=False)
    digits: int = DEFAULT_DIGITS

    def __post_init__(self) -> None:
        if not isinstance(self.secret, (bytes, bytearray, memoryview)):
            raise ValueError("Secret must be bytes.")
        object.__setattr__(self, "secret", bytes(self.secret))
        validate_digits(self.digits)

    # ── Alternative constructors ─────────────────────────────────────────

    @classmethod
    def from_utf8(cls, secret: str, digits: int = DEFAULT_DIGITS) -> "HOTP":
        """Build a generator from the UTF-8 bytes of ``secret``."""
        return cls(secret.encode("utf-8"), digits)

    @classmethod
    def from_base32(cls, secret: str, digits: int = DEFAULT_DIGITS) -> "HOTP":
        """
        Build a generator from a base32-encoded secret.

        Raises:
            SecretDecodeError: If ``secret`` is not valid base32.
        """
        return cls(decode_secret(secret), digits)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def digest(self) -> DigestKind:
        return DigestKind.SHA1

    def generate(self, counter: int) -> OTPResult:
        """
        Generate the HOTP code for ``counter``.

        Raises:
            ValueError:    If ``counter`` is outside [0, 2**64 - 1].
            InvalidSecret: If the keyed hash rejects the secret.
        """
        validate_counter(counter)
        return hotp_value(self.secret, counter, self.digits, DigestKind.SHA1)

    def verify(self, token: str, counter: int) -> bool:
        """Return True if ``token`` is the code for exactly ``counter``."""
        expected = self.generate(counter).as_text()
        return constant_time_compare(token.strip(), expected)

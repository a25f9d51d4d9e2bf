"""
Cryptographic primitives for otpkit.

Keyed hash : HMAC over SHA-1 / SHA-256 / SHA-512 (``cryptography``)
Comparison : constant-time token comparison
"""

import hmac
import logging
from enum import Enum

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.hmac import HMAC

from otpkit.core.errors import InvalidSecret

logger = logging.getLogger(__name__)


class DigestKind(str, Enum):
    """Supported HMAC digest algorithms."""

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @classmethod
    def from_name(cls, name: str) -> "DigestKind":
        """
        Look up a digest by its exact (case-sensitive) name.

        Raises:
            ValueError: If ``name`` is not one of SHA1, SHA256, SHA512.
        """
        return cls(name)

    @property
    def digest_size(self) -> int:
        """Length in bytes of the keyed-hash output."""
        return _HASH_MAP[self].digest_size


_HASH_MAP: dict[DigestKind, type[hashes.HashAlgorithm]] = {
    DigestKind.SHA1: hashes.SHA1,
    DigestKind.SHA256: hashes.SHA256,
    DigestKind.SHA512: hashes.SHA512,
}


# ── Keyed hash ────────────────────────────────────────────────────────────────

def keyed_hash(secret: bytes, message: bytes, digest: DigestKind) -> bytes:
    """
    Compute ``HMAC-<digest>(secret, message)``.

    Args:
        secret:  Raw key bytes.
        message: Data to authenticate.
        digest:  Underlying hash algorithm.

    Returns:
        The full MAC (20, 32 or 64 bytes).

    Raises:
        InvalidSecret: If the HMAC cannot be initialised with ``secret``.
    """
    try:
        mac = HMAC(secret, _HASH_MAP[digest]())
    except (TypeError, ValueError, UnsupportedAlgorithm) as exc:
        logger.warning("HMAC-%s initialisation failed: %s", digest.value, type(exc).__name__)
        raise InvalidSecret(f"Secret rejected by HMAC-{digest.value}: {exc}") from exc
    mac.update(message)
    return mac.finalize()


def constant_time_compare(a: str, b: str) -> bool:
    """Return True if *a* == *b* in constant time (timing-safe)."""
    return hmac.compare_digest(a.encode(), b.encode())

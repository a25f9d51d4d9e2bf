"""
TOTP (Time-based One-Time Password) implementation following RFC 6238.

Produces codes identical to Google Authenticator. The caller always
supplies the current Unix time; there is no clock access in this module.
"""

from dataclasses import dataclass, field

from otpkit.core.crypto import DigestKind, constant_time_compare
from otpkit.core.errors import ClockBeforeEpoch
from otpkit.core.hotp import hotp_value
from otpkit.core.result import OTPResult
from otpkit.core.utils import (
    DEFAULT_DIGITS,
    DEFAULT_PERIOD,
    decode_secret,
    validate_counter,
    validate_digits,
    validate_period,
)


@dataclass(frozen=True)
class TOTP:
    """Time-step OTP generator."""

    secret: bytes = field(repr=False)
    digest: DigestKind = DigestKind.SHA1
    digits: int = DEFAULT_DIGITS
    period: int = DEFAULT_PERIOD

    def __post_init__(self) -> None:
        if not isinstance(self.secret, (bytes, bytearray, memoryview)):
            raise ValueError("Secret must be bytes.")
        object.__setattr__(self, "secret", bytes(self.secret))
        if not isinstance(self.digest, DigestKind):
            raise ValueError(f"Unsupported digest {self.digest!r}.")
        validate_digits(self.digits)
        validate_period(self.period)

    # ── Alternative constructors ─────────────────────────────────────────

    @classmethod
    def from_utf8(
        cls,
        secret: str,
        digest: DigestKind = DigestKind.SHA1,
        digits: int = DEFAULT_DIGITS,
        period: int = DEFAULT_PERIOD,
    ) -> "TOTP":
        """Build a generator from the UTF-8 bytes of ``secret``."""
        return cls(secret.encode("utf-8"), digest, digits, period)

    @classmethod
    def from_base32(
        cls,
        secret: str,
        digest: DigestKind = DigestKind.SHA1,
        digits: int = DEFAULT_DIGITS,
        period: int = DEFAULT_PERIOD,
    ) -> "TOTP":
        """
        Build a generator from a base32-encoded secret.

        Raises:
            SecretDecodeError: If ``secret`` is not valid base32.
        """
        return cls(decode_secret(secret), digest, digits, period)

    # ── Public API ───────────────────────────────────────────────────────

    def _elapsed(self, time: int, epoch_start: int) -> int:
        for name, value in (("time", time), ("epoch_start", epoch_start)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"'{name}' must be an integer number of seconds.")
            if value < 0:
                raise ValueError(f"'{name}' must be non-negative.")
        if time < epoch_start:
            raise ClockBeforeEpoch(time, epoch_start)
        return time - epoch_start

    def counter_at(self, time: int, epoch_start: int = 0) -> int:
        """
        Return the number of whole periods elapsed since ``epoch_start``.

        Raises:
            ClockBeforeEpoch: If ``time`` is before ``epoch_start``.
        """
        return self._elapsed(time, epoch_start) // self.period

    def generate(self, time: int, epoch_start: int = 0) -> OTPResult:
        """
        Generate the TOTP code valid at ``time``.

        Args:
            time:        Unix timestamp in whole seconds.
            epoch_start: Unix time at which step 0 begins (T0, default 0).

        Returns:
            The code for the current time step.

        Raises:
            ClockBeforeEpoch: If ``time`` is before ``epoch_start``.
            InvalidSecret:    If the keyed hash rejects the secret.
        """
        counter = self.counter_at(time, epoch_start)
        validate_counter(counter)
        return hotp_value(self.secret, counter, self.digits, self.digest)

    def remaining_seconds(self, time: int, epoch_start: int = 0) -> int:
        """Return seconds until the time step containing ``time`` expires."""
        return self.period - (self._elapsed(time, epoch_start) % self.period)

    def verify(self, token: str, time: int, epoch_start: int = 0) -> bool:
        """Return True if ``token`` matches the code for the step containing ``time``."""
        expected = self.generate(time, epoch_start).as_text()
        return constant_time_compare(token.strip(), expected)

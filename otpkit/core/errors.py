"""
Exception types raised by otpkit.

Every error caused by externally supplied data (secrets, timestamps, URIs)
derives from both :class:`OTPError` and :class:`ValueError`, so callers can
catch either the precise variant or a plain ``ValueError``.
"""

from typing import Optional


class OTPError(Exception):
    """Base class for all otpkit errors."""


# ── Generation-time errors ───────────────────────────────────────────────────

class InvalidSecret(OTPError, ValueError):
    """The keyed-hash primitive rejected the secret key material."""


class ClockBeforeEpoch(OTPError, ValueError):
    """A TOTP timestamp lies before the configured epoch start."""

    def __init__(self, time: int, epoch_start: int) -> None:
        self.time = time
        self.epoch_start = epoch_start
        super().__init__(
            f"Timestamp {time} is before the TOTP epoch start {epoch_start}."
        )


class SecretDecodeError(OTPError, ValueError):
    """A text secret is not valid base32."""


# ── otpauth:// URI parse errors ──────────────────────────────────────────────

class ParseError(OTPError, ValueError):
    """
    Base class for otpauth URI parse failures.

    Attributes:
        value: The offending raw substring, when there is one.
    """

    message = "Invalid otpauth URI."

    def __init__(self, value: Optional[str] = None) -> None:
        self.value = value
        if value is None:
            text = self.message
        else:
            text = f"{self.message} Got {value!r}."
        super().__init__(text)


class UriParseError(ParseError):
    message = "Malformed URI."


class WrongScheme(ParseError):
    message = "Expected 'otpauth' scheme."


class MissingOtpType(ParseError):
    message = "Missing OTP type in otpauth URI."


class UnknownOtpType(ParseError):
    message = "Unknown OTP type. Expected totp or hotp."


class MissingSecret(ParseError):
    message = "Missing 'secret' parameter in otpauth URI."


class SecretParsingError(ParseError):
    message = "'secret' is not a valid base32 string."


class UnknownAlgorithm(ParseError):
    message = "Unsupported algorithm. Supported: SHA1, SHA256, SHA512."


class WrongDigitNumber(ParseError):
    message = "'digits' must be an integer between 1 and 10."


class InvalidPeriod(ParseError):
    message = "'period' must be a positive integer."


class MissingCounter(ParseError):
    message = "HOTP URI requires a 'counter' parameter."


class WrongCounter(ParseError):
    message = "'counter' must be a non-negative integer."

"""
otpkit – HOTP (RFC 4226) / TOTP (RFC 6238) generation and otpauth:// URI parsing.
"""

from otpkit.core.crypto import DigestKind
from otpkit.core.errors import (
    ClockBeforeEpoch,
    InvalidPeriod,
    InvalidSecret,
    MissingCounter,
    MissingOtpType,
    MissingSecret,
    OTPError,
    ParseError,
    SecretDecodeError,
    SecretParsingError,
    UnknownAlgorithm,
    UnknownOtpType,
    UriParseError,
    WrongCounter,
    WrongDigitNumber,
    WrongScheme,
)
from otpkit.core.hotp import HOTP
from otpkit.core.result import OTPResult
from otpkit.core.totp import TOTP
from otpkit.qr.parser import ParsedHOTP, ParsedTOTP, ParseResult, parse_otpauth_uri

__version__ = "1.0.0"

__all__ = [
    "ClockBeforeEpoch",
    "DigestKind",
    "HOTP",
    "InvalidPeriod",
    "InvalidSecret",
    "MissingCounter",
    "MissingOtpType",
    "MissingSecret",
    "OTPError",
    "OTPResult",
    "ParseError",
    "ParseResult",
    "ParsedHOTP",
    "ParsedTOTP",
    "SecretDecodeError",
    "SecretParsingError",
    "TOTP",
    "UnknownAlgorithm",
    "UnknownOtpType",
    "UriParseError",
    "WrongCounter",
    "WrongDigitNumber",
    "WrongScheme",
    "parse_otpauth_uri",
]

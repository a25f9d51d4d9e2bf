"""
Parse otpauth:// URIs as defined by the Google Authenticator Key URI Format.

Reference: https://github.com/google/google-authenticator/wiki/Key-Uri-Format

The label and ``issuer`` parameter are accepted but not interpreted.
"""

import logging
import urllib.parse
from dataclasses import dataclass
from typing import Union

from otpkit.core.crypto import DigestKind
from otpkit.core.errors import (
    InvalidPeriod,
    MissingCounter,
    MissingOtpType,
    MissingSecret,
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
from otpkit.core.totp import TOTP
from otpkit.core.utils import (
    DEFAULT_DIGITS,
    DEFAULT_PERIOD,
    MAX_COUNTER,
    MAX_DIGITS,
    decode_secret,
    parse_unsigned,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedTOTP:
    """A TOTP credential read from an otpauth URI."""

    totp: TOTP

    @property
    def otp_type(self) -> str:
        return "totp"


@dataclass(frozen=True)
class ParsedHOTP:
    """An HOTP credential read from an otpauth URI, with its starting counter."""

    hotp: HOTP
    counter: int

    @property
    def otp_type(self) -> str:
        return "hotp"


ParseResult = Union[ParsedTOTP, ParsedHOTP]


def parse_otpauth_uri(uri: str) -> ParseResult:
    """
    Parse and validate an ``otpauth://`` URI.

    Validation is fail-fast: the first problem found is raised.

    Args:
        uri: Full otpauth URI string.

    Returns:
        :class:`ParsedTOTP` or :class:`ParsedHOTP`.

    Raises:
        ParseError: One of its subclasses, describing the first problem.
    """
    try:
        return _parse(uri)
    except ParseError as exc:
        logger.debug("Rejected otpauth URI: %s", type(exc).__name__)
        raise


def _parse(uri: str) -> ParseResult:
    uri = uri.strip()

    try:
        parsed = urllib.parse.urlsplit(uri)
    except ValueError as exc:
        raise UriParseError(uri) from exc
    if not parsed.scheme:
        raise UriParseError(uri)

    if parsed.scheme != "otpauth":
        raise WrongScheme(parsed.scheme)

    # OTP type lives in the authority; drop any userinfo / port
    otp_type = parsed.netloc.rpartition("@")[2].partition(":")[0]
    if not otp_type:
        raise MissingOtpType()

    # Query parameters (last occurrence wins)
    params = dict(urllib.parse.parse_qsl(parsed.query, keep_blank_values=True))

    # Secret (required)
    # An empty value counts as missing rather than as an empty key
    raw_secret = params.get("secret", "")
    if not raw_secret:
        raise MissingSecret()
    try:
        secret = decode_secret(raw_secret)
    except SecretDecodeError as exc:
        raise SecretParsingError(raw_secret) from exc

    # Digits
    raw_digits = params.get("digits")
    if raw_digits is None:
        digits = DEFAULT_DIGITS
    else:
        digits = parse_unsigned(raw_digits, MAX_DIGITS)
        if not digits:
            raise WrongDigitNumber(raw_digits)

    if otp_type == "totp":
        raw_alg = params.get("algorithm")
        if raw_alg is None:
            digest = DigestKind.SHA1
        else:
            try:
                digest = DigestKind.from_name(raw_alg)
            except ValueError as exc:
                raise UnknownAlgorithm(raw_alg) from exc

        raw_period = params.get("period")
        if raw_period is None:
            period = DEFAULT_PERIOD
        else:
            period = parse_unsigned(raw_period, MAX_COUNTER)
            if not period:
                raise InvalidPeriod(raw_period)

        return ParsedTOTP(TOTP(secret, digest, digits, period))

    if otp_type == "hotp":
        raw_counter = params.get("counter")
        if raw_counter is None:
            raise MissingCounter()
        counter = parse_unsigned(raw_counter, MAX_COUNTER)
        if counter is None:
            raise WrongCounter(raw_counter)

        return ParsedHOTP(HOTP(secret, digits), counter)

    raise UnknownOtpType(otp_type)

"""Tests for otpkit.core.result."""

import pytest

from otpkit.core.result import OTPResult


@pytest.mark.parametrize("digits", range(1, 11))
def test_text_width_matches_digits(digits: int) -> None:
    for code in (0, 7, 10**digits - 1):
        result = OTPResult(digits, code)
        text = result.as_text()
        assert len(text) == digits
        assert int(text) == code


def test_zero_padding() -> None:
    assert OTPResult(8, 7081804).as_text() == "07081804"
    assert OTPResult(6, 0).as_text() == "000000"


def test_str_and_int() -> None:
    result = OTPResult(6, 42)
    assert str(result) == "000042"
    assert int(result) == 42
    assert result.as_number() == 42
    assert result.digits == 6


def test_equality() -> None:
    assert OTPResult(6, 755224) == OTPResult(6, 755224)
    assert OTPResult(6, 1) != OTPResult(7, 1)


def test_immutable() -> None:
    result = OTPResult(6, 1)
    with pytest.raises(AttributeError):
        result.code = 2  # type: ignore[misc]


@pytest.mark.parametrize("digits,code", [(6, -1), (6, 1_000_000), (1, 10)])
def test_code_must_fit(digits: int, code: int) -> None:
    with pytest.raises(ValueError, match="fit"):
        OTPResult(digits, code)


def test_zero_digits_rejected() -> None:
    with pytest.raises(ValueError, match="Digits"):
        OTPResult(0, 0)

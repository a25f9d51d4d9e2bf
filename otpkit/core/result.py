"""
The value returned by HOTP / TOTP generation.
"""

from dataclasses import dataclass

from otpkit.core.utils import validate_digits


@dataclass(frozen=True)
class OTPResult:
    """A generated one-time password and the width it is rendered at."""

    digits: int
    code: int

    def __post_init__(self) -> None:
        validate_digits(self.digits)
        if self.code < 0 or self.code >= 10**self.digits:
            raise ValueError(
                f"Code {self.code} does not fit in {self.digits} digits."
            )

    def as_text(self) -> str:
        """Return the code as a decimal string zero-padded to ``digits``."""
        return str(self.code).zfill(self.digits)

    def as_number(self) -> int:
        return self.code

    def __str__(self) -> str:
        return self.as_text()

    def __int__(self) -> int:
        return self.code

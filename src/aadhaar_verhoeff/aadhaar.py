"""
Aadhaar number validation and check digit generation

Aadhaar Format (12 digits):
- Body: 11 digits
- Check: 1 digit (Verhoeff check digit)

Whitespace anywhere in the input is ignored. Any other non-digit
character makes the input malformed.
"""

import re
from typing import Any, List, Tuple

from . import verhoeff
from .verhoeff import FoldStep

NUMBER_LENGTH = 12
PREFIX_LENGTH = 11

_WHITESPACE = re.compile(r"\s+")
_ASCII_DIGITS = re.compile(r"[0-9]*")


class InvalidFormat(ValueError):
    """Input is not the required number of decimal digits"""

    def __init__(self, value: Any, expected_length: int):
        self.value = value
        self.expected_length = expected_length
        super().__init__(
            f"expected {expected_length} digits, got: {value!r}"
        )


def clean(raw: Any) -> str:
    """
    Remove all whitespace from raw input

    Args:
        raw: User supplied number, e.g. "2341 2341 2346"

    Returns:
        Input without whitespace
    """
    if not isinstance(raw, str):
        raise InvalidFormat(raw, NUMBER_LENGTH)
    return _WHITESPACE.sub("", raw)


def parse_digits(raw: Any, length: int) -> Tuple[int, ...]:
    """
    Clean raw input and convert it to digits

    Args:
        raw: User supplied number
        length: Required digit count after cleaning

    Returns:
        Digits in natural order

    Raises:
        InvalidFormat: wrong length or a non-digit character
    """
    if not isinstance(raw, str):
        raise InvalidFormat(raw, length)
    cleaned = clean(raw)
    if len(cleaned) != length or not _ASCII_DIGITS.fullmatch(cleaned):
        raise InvalidFormat(cleaned, length)
    return tuple(int(ch) for ch in cleaned)


def validate(raw: Any) -> bool:
    """
    Validate a 12-digit Aadhaar number

    Args:
        raw: Number including check digit (may contain spaces)

    Returns:
        True if valid, False otherwise (malformed input included)
    """
    try:
        digits = parse_digits(raw, NUMBER_LENGTH)
    except InvalidFormat:
        return False
    return verhoeff.is_valid(digits)


def generate_check_digit(raw_prefix: Any) -> int:
    """
    Calculate the 12th digit for an 11-digit prefix

    Args:
        raw_prefix: First 11 digits (may contain spaces)

    Returns:
        Check digit (0-9)

    Raises:
        InvalidFormat: prefix is not 11 digits
    """
    return verhoeff.check_digit(parse_digits(raw_prefix, PREFIX_LENGTH))


def complete(raw_prefix: Any) -> str:
    """Append the check digit to an 11-digit prefix"""
    digits = parse_digits(raw_prefix, PREFIX_LENGTH)
    body = "".join(str(d) for d in digits)
    return body + str(verhoeff.check_digit(digits))


def checksum(raw: Any) -> int:
    """Final running checksum of a 12-digit number, 0 when valid"""
    return verhoeff.fold(parse_digits(raw, NUMBER_LENGTH))


def explain(raw: Any) -> List[FoldStep]:
    """Step-by-step fold of a 12-digit number"""
    return verhoeff.trace(parse_digits(raw, NUMBER_LENGTH))


def format_number(raw: Any) -> str:
    """
    Group digits in fours for display

    Args:
        raw: Full or partial number

    Returns:
        Display form, e.g. "2341 2341 2346"
    """
    cleaned = clean(raw)
    return " ".join(cleaned[i:i + 4] for i in range(0, len(cleaned), 4))


def mask(raw: Any) -> str:
    """Hide all but the last four characters, for logging"""
    if not isinstance(raw, str):
        return "<invalid>"
    cleaned = clean(raw)
    if len(cleaned) <= 4:
        return "*" * len(cleaned)
    return "*" * (len(cleaned) - 4) + cleaned[-4:]

"""Digit extraction and uniformity check for classified inputs."""

from __future__ import annotations

from itertools import takewhile

from brdoc.classifier import Classification, ExtractionMode
from brdoc.errors import ErrorKind, InvalidDocumentNumber

_DIGITS = frozenset("0123456789")


def _is_digit(char: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits such as "٣".
    return char in _DIGITS


def extract_digits(value: str, mode: ExtractionMode) -> list[int]:
    """Convert *value* to digit values using the given extraction mode."""
    if mode is ExtractionMode.STRICT:
        chars = takewhile(_is_digit, value)
    else:
        chars = filter(_is_digit, value)
    return [int(c) for c in chars]


def all_equal(digits: list[int]) -> bool:
    return len(set(digits)) <= 1


def sanitize(value: str, classification: Classification) -> list[int]:
    """Extract the payload digits of a classified input.

    Raises:
        InvalidDocumentNumber: ``INVALID_CHARACTERS`` if the digit count is
            short of the canonical length, ``INVALID_DOCUMENT`` if every
            digit is the same.
    """
    digits = extract_digits(value, classification.mode)
    expected = classification.canonical_length

    if len(digits) != expected:
        raise InvalidDocumentNumber(
            ErrorKind.INVALID_CHARACTERS,
            f"non-digit character at position {len(digits)}",
        )

    if all_equal(digits):
        raise InvalidDocumentNumber(ErrorKind.INVALID_DOCUMENT, "all digits are equal")

    return digits

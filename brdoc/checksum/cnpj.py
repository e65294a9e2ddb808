"""CNPJ check digits (mod 11, cyclic weights 2..9)."""

from __future__ import annotations

from brdoc.errors import ErrorKind, InvalidDocumentNumber

PAYLOAD_SIZE = 12

# The first pass uses the last twelve weights.
POSITIONAL_WEIGHTS: tuple[int, ...] = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
FIRST_WEIGHTS = POSITIONAL_WEIGHTS[1:]
SECOND_WEIGHTS = POSITIONAL_WEIGHTS


def _digit_from(total: int) -> int:
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def compute_check_digits(payload: list[int]) -> tuple[int, int]:
    """Compute both check digits for the first twelve CNPJ digits."""
    if len(payload) != PAYLOAD_SIZE:
        raise ValueError(f"CNPJ payload must have {PAYLOAD_SIZE} digits, got {len(payload)}")

    first = _digit_from(sum(d * w for d, w in zip(payload, FIRST_WEIGHTS)))
    second = _digit_from(sum(d * w for d, w in zip([*payload, first], SECOND_WEIGHTS)))
    return first, second


def verify(digits: list[int]) -> None:
    """Check the trailing two digits of a 14-digit CNPJ.

    Raises:
        InvalidDocumentNumber: ``INVALID_DOCUMENT`` on mismatch.
    """
    expected = compute_check_digits(digits[:PAYLOAD_SIZE])
    if tuple(digits[-2:]) != expected:
        raise InvalidDocumentNumber(ErrorKind.INVALID_DOCUMENT, "CNPJ check digits do not match")

"""CPF check digits (mod 11, descending weights)."""

from __future__ import annotations

from brdoc.errors import ErrorKind, InvalidDocumentNumber

PAYLOAD_SIZE = 9


def _fold(payload: list[int], start_weight: int) -> tuple[int, int]:
    """Weighted sum with weights start_weight, start_weight - 1, ...

    Returns the sum and the next (unused) weight.
    """
    total = 0
    weight = start_weight
    for digit in payload:
        total += digit * weight
        weight -= 1
    return total, weight


def _ten_to_zero(n: int) -> int:
    return 0 if n == 10 else n


def compute_check_digits(payload: list[int]) -> tuple[int, int]:
    """Compute both check digits for the first nine CPF digits."""
    if len(payload) != PAYLOAD_SIZE:
        raise ValueError(f"CPF payload must have {PAYLOAD_SIZE} digits, got {len(payload)}")

    first_sum, _ = _fold(payload, 10)
    first = _ten_to_zero(first_sum * 10 % 11)

    second_sum, next_weight = _fold(payload, 11)
    # next_weight is 2: the first check digit extends the fold.
    second = _ten_to_zero((second_sum + first * next_weight) * 10 % 11)

    return first, second


def verify(digits: list[int]) -> None:
    """Check the trailing two digits of an 11-digit CPF.

    Raises:
        InvalidDocumentNumber: ``INVALID_DOCUMENT`` on mismatch.
    """
    expected = compute_check_digits(digits[:PAYLOAD_SIZE])
    if tuple(digits[-2:]) != expected:
        raise InvalidDocumentNumber(ErrorKind.INVALID_DOCUMENT, "CPF check digits do not match")

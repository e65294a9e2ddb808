"""Error taxonomy for CPF/CNPJ validation."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Why an input was rejected, ordered by the stage that detects it.

    Length is checked first, then characters/mask, then uniformity and
    check digits. Only the first failure is ever reported.
    """

    INVALID_INPUT = "invalid_input"
    INVALID_CHARACTERS = "invalid_characters"
    INVALID_DOCUMENT = "invalid_document"


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_INPUT: "length does not match any CPF or CNPJ shape",
    ErrorKind.INVALID_CHARACTERS: "unexpected characters or punctuation",
    ErrorKind.INVALID_DOCUMENT: "check digits do not match",
}


class InvalidDocumentNumber(ValueError):
    """Raised when a CPF/CNPJ is required but the input is not one.

    Carries the :class:`ErrorKind` so callers can branch on it.
    """

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        message = f"{kind.value}: {detail or _MESSAGES[kind]}"
        super().__init__(message)

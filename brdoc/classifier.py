"""Length/mask classifier: decides document family and extraction mode."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from brdoc.errors import ErrorKind, InvalidDocumentNumber

CPF_LENGTH = 11
CNPJ_LENGTH = 14

# Raw input lengths (characters) that can hold a document.
SANITIZED_CPF_SIZE = CPF_LENGTH
FORMATTED_CPF_AND_SANITIZED_CNPJ_SIZE = CNPJ_LENGTH
FORMATTED_CNPJ_SIZE = 18

# [0-9] rather than \d: only ASCII digits are accepted.
CPF_MASK = re.compile(r"[0-9]{3}\.[0-9]{3}\.[0-9]{3}-[0-9]{2}")
CNPJ_MASK = re.compile(r"[0-9]{2}\.[0-9]{3}\.[0-9]{3}/[0-9]{4}-[0-9]{2}")


class DocumentType(StrEnum):
    CPF = "cpf"
    CNPJ = "cnpj"


class ExtractionMode(StrEnum):
    STRICT = "strict"  # stop at the first non-digit
    MASK = "mask"  # drop every non-digit


_CANONICAL_LENGTH: dict[DocumentType, int] = {
    DocumentType.CPF: CPF_LENGTH,
    DocumentType.CNPJ: CNPJ_LENGTH,
}


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying a raw input."""

    document_type: DocumentType
    mode: ExtractionMode

    @property
    def canonical_length(self) -> int:
        return _CANONICAL_LENGTH[self.document_type]


def classify(value: str) -> Classification:
    """Pick the document family and extraction mode for *value*.

    Args:
        value: Raw input, either bare digits or punctuated with the
            ``###.###.###-##`` / ``##.###.###/####-##`` masks.

    Returns:
        The :class:`Classification` the sanitizer should apply.

    Raises:
        InvalidDocumentNumber: ``INVALID_INPUT`` for an unrecognized length,
            ``INVALID_CHARACTERS`` for an 18-character input that does not
            match the CNPJ mask.
    """
    if not isinstance(value, str):
        raise InvalidDocumentNumber(
            ErrorKind.INVALID_INPUT, f"expected text, got {type(value).__name__}"
        )

    size = len(value)

    if size == SANITIZED_CPF_SIZE:
        return Classification(DocumentType.CPF, ExtractionMode.STRICT)

    if size == FORMATTED_CPF_AND_SANITIZED_CNPJ_SIZE:
        # Both shapes are 14 characters long; the mask decides.
        if CPF_MASK.fullmatch(value):
            return Classification(DocumentType.CPF, ExtractionMode.MASK)
        return Classification(DocumentType.CNPJ, ExtractionMode.STRICT)

    if size == FORMATTED_CNPJ_SIZE:
        if CNPJ_MASK.fullmatch(value):
            return Classification(DocumentType.CNPJ, ExtractionMode.MASK)
        raise InvalidDocumentNumber(
            ErrorKind.INVALID_CHARACTERS, "input does not match ##.###.###/####-##"
        )

    raise InvalidDocumentNumber(
        ErrorKind.INVALID_INPUT,
        f"expected {SANITIZED_CPF_SIZE}, {FORMATTED_CPF_AND_SANITIZED_CNPJ_SIZE} "
        f"or {FORMATTED_CNPJ_SIZE} characters, got {size}",
    )

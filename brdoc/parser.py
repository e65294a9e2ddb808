"""Unified entry point: classify -> sanitize -> checksum -> document.

Invalid input is an expected outcome here, so :func:`parse` and
:func:`validate` return the error kind instead of raising. Each stage
signals failure with :class:`InvalidDocumentNumber`; this module is the
only place that turns it back into a value.
"""

from __future__ import annotations

import logging

from brdoc.checksum import cnpj, cpf
from brdoc.classifier import DocumentType, classify
from brdoc.document import CNPJ, CPF, DocumentKind, ParseResult
from brdoc.errors import ErrorKind, InvalidDocumentNumber
from brdoc.sanitizer import sanitize

logger = logging.getLogger(__name__)


def _evaluate(value: str) -> DocumentKind:
    classification = classify(value)
    digits = sanitize(value, classification)
    number = "".join(str(d) for d in digits)

    if classification.document_type is DocumentType.CPF:
        cpf.verify(digits)
        return CPF(number)

    cnpj.verify(digits)
    return CNPJ(number)


def parse(value: str) -> ParseResult:
    """Validate *value* and wrap the canonical digits in a CPF or CNPJ.

    Args:
        value: Bare digits (11 or 14) or a formatted CPF/CNPJ.

    Returns:
        A :class:`ParseResult` holding either the document or the
        :class:`ErrorKind` of the first failing check.
    """
    try:
        document = _evaluate(value)
    except InvalidDocumentNumber as exc:
        logger.debug(
            "Rejected document input (%s chars): %s",
            len(value) if isinstance(value, str) else "n/a",
            exc.kind.value,
        )
        return ParseResult(error=exc.kind)
    return ParseResult(document=document)


def validate(value: str) -> ErrorKind | None:
    """Check *value* without building a document. ``None`` means valid."""
    return parse(value).error


def is_valid(value: str) -> bool:
    return validate(value) is None


def parse_or_raise(value: str) -> DocumentKind:
    """Like :func:`parse`, but raise :class:`InvalidDocumentNumber` on failure."""
    return parse(value).unwrap()

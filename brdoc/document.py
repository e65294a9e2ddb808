"""Validated document values and the result of parsing one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar, Union

from brdoc.classifier import CNPJ_LENGTH, CPF_LENGTH, DocumentType
from brdoc.errors import ErrorKind, InvalidDocumentNumber

T = TypeVar("T")


def _check_canonical(number: str, length: int, label: str) -> None:
    if len(number) != length or not all("0" <= c <= "9" for c in number):
        raise InvalidDocumentNumber(
            ErrorKind.INVALID_CHARACTERS,
            f"{label} must be exactly {length} ASCII digits",
        )


@dataclass(frozen=True)
class CPF:
    """A validated CPF. ``number`` holds the 11 canonical digits.

    Obtain instances through :func:`brdoc.parse`; the constructor only
    enforces the canonical shape, not the check digits.
    """

    number: str

    document_type = DocumentType.CPF

    def __post_init__(self) -> None:
        _check_canonical(self.number, CPF_LENGTH, "CPF")

    def __str__(self) -> str:
        return self.number


@dataclass(frozen=True)
class CNPJ:
    """A validated CNPJ. ``number`` holds the 14 canonical digits."""

    number: str

    document_type = DocumentType.CNPJ

    def __post_init__(self) -> None:
        _check_canonical(self.number, CNPJ_LENGTH, "CNPJ")

    def __str__(self) -> str:
        return self.number

    @property
    def base(self) -> str:
        """First 8 digits: identifies the company regardless of branch."""
        return self.number[:8]

    @property
    def branch(self) -> str:
        """Digits 9-12. ``0001`` is the headquarters."""
        return self.number[8:12]

    @property
    def is_headquarters(self) -> bool:
        return self.branch == "0001"


DocumentKind = Union[CPF, CNPJ]


@dataclass(frozen=True)
class ParseResult:
    """Outcome of :func:`brdoc.parse`: exactly one of the fields is set."""

    document: DocumentKind | None = None
    error: ErrorKind | None = None

    def __post_init__(self) -> None:
        if (self.document is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of document or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> DocumentKind:
        """Return the document or raise :class:`InvalidDocumentNumber`."""
        if self.document is None:
            raise InvalidDocumentNumber(self.error)
        return self.document

    def unwrap_or(self, default: T) -> DocumentKind | T:
        return self.document if self.document is not None else default


def to_text(document: DocumentKind) -> str:
    """Canonical digit-only text of a validated document."""
    return document.number


def to_formatted_text(document: DocumentKind) -> str:
    """Render with the usual punctuation.

    ``XXX.XXX.XXX-XX`` for CPF, ``XX.XXX.XXX/XXXX-XX`` for CNPJ.
    """
    n = document.number
    if isinstance(document, CPF):
        return f"{n[0:3]}.{n[3:6]}.{n[6:9]}-{n[9:11]}"
    return f"{n[0:2]}.{n[2:5]}.{n[5:8]}/{n[8:12]}-{n[12:14]}"

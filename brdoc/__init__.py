"""brdoc — CPF/CNPJ classification and check-digit validation."""

from brdoc.document import CNPJ, CPF, DocumentKind, ParseResult, to_formatted_text, to_text
from brdoc.errors import ErrorKind, InvalidDocumentNumber
from brdoc.fields import CNPJNumber, CPFNumber, DocumentNumber
from brdoc.parser import is_valid, parse, parse_or_raise, validate
from brdoc.pii import hash_document

__all__ = [
    "CNPJ",
    "CNPJNumber",
    "CPF",
    "CPFNumber",
    "DocumentKind",
    "DocumentNumber",
    "ErrorKind",
    "InvalidDocumentNumber",
    "ParseResult",
    "hash_document",
    "is_valid",
    "parse",
    "parse_or_raise",
    "to_formatted_text",
    "to_text",
    "validate",
]

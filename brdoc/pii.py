"""PII utilities for LGPD compliance — CPF/CNPJ hashing."""

from __future__ import annotations

import hashlib
import os

from brdoc.document import CNPJ, CPF, DocumentKind
from brdoc.parser import parse_or_raise

# In production, set BRDOC_PII_SALT as an environment variable.
_DEFAULT_SALT = "brdoc-default-dev-salt-change-in-prod"


def default_salt() -> str:
    return os.environ.get("BRDOC_PII_SALT", _DEFAULT_SALT)


def hash_document(value: DocumentKind | str, *, salt: str | None = None) -> str:
    """Hash a CPF or CNPJ using SHA-256 with salt. Returns 64-char hex string.

    Args:
        value: A parsed document, or text (formatted or not) to parse first.
        salt: Optional override salt. Uses BRDOC_PII_SALT env var by default.

    Returns:
        64-character lowercase hex SHA-256 hash of the canonical digits.

    Raises:
        InvalidDocumentNumber: If *value* is text that is not a valid CPF/CNPJ.
    """
    document = value if isinstance(value, (CPF, CNPJ)) else parse_or_raise(value)

    effective_salt = salt if salt is not None else default_salt()
    payload = f"{effective_salt}:{document.number}".encode("utf-8")
    return hashlib.sha256(payload).hexdigest()

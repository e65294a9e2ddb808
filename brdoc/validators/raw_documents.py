"""Raw-document safety net — catches un-hashed CPF/CNPJ values before persistence.

Upstream code is responsible for hashing documents with
:func:`brdoc.pii.hash_document`. This scanner runs right before loading and
flags any CPF/CNPJ-named field whose value is a checksum-valid document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pydantic import BaseModel

from brdoc.classifier import DocumentType
from brdoc.parser import parse

logger = logging.getLogger(__name__)

# Field names ending like this already carry hash_document() output.
_HASHED_SUFFIX = "_hash"


@dataclass
class RawDocumentFinding:
    """A checksum-valid CPF/CNPJ found in a record field."""

    record_index: int
    field_name: str
    document_type: DocumentType

    @property
    def detail(self) -> str:
        return (
            f"Field '{self.field_name}' contains a raw {self.document_type.value.upper()}. "
            f"Documents must be hashed before persistence."
        )


class RawDocumentScanner:
    """Ensures CPF/CNPJ fields are hashed before persistence."""

    def scan(self, records: list[BaseModel]) -> list[RawDocumentFinding]:
        """Flag fields whose value parses as a valid CPF or CNPJ.

        Only fields whose name mentions ``cpf`` or ``cnpj`` are inspected;
        a value that merely has 11 or 14 digits but fails the checksum is
        not a document and is left alone.
        """
        findings: list[RawDocumentFinding] = []

        for idx, record in enumerate(records):
            for field_name, value in record.model_dump().items():
                if not isinstance(value, str) or not self._field_looks_like_document(field_name):
                    continue

                result = parse(value)
                if not result.ok:
                    continue

                finding = RawDocumentFinding(
                    record_index=idx,
                    field_name=field_name,
                    document_type=result.unwrap().document_type,
                )
                findings.append(finding)
                logger.error(
                    "RAW %s DETECTED in record %d, field '%s'.",
                    finding.document_type.value.upper(),
                    idx,
                    field_name,
                )

        if findings:
            logger.warning(
                "Document scan found %d raw document(s) across %d records",
                len(findings),
                len(records),
            )
        else:
            logger.debug("Document scan passed for %d records", len(records))

        return findings

    @staticmethod
    def _field_looks_like_document(field_name: str) -> bool:
        lower = field_name.lower()
        if lower.endswith(_HASHED_SUFFIX):
            return False
        return any(t.value in lower for t in DocumentType)

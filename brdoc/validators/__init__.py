"""Validators — batch checks and raw-document safety net before loading."""

from brdoc.validators.batch import (
    BatchStats,
    BatchValidationResult,
    DocumentBatchValidator,
    RejectedValue,
)
from brdoc.validators.raw_documents import RawDocumentFinding, RawDocumentScanner

__all__ = [
    "BatchStats",
    "BatchValidationResult",
    "DocumentBatchValidator",
    "RawDocumentFinding",
    "RawDocumentScanner",
    "RejectedValue",
]

"""Batch validation of raw CPF/CNPJ values before loading."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from brdoc.classifier import DocumentType
from brdoc.document import DocumentKind
from brdoc.errors import ErrorKind
from brdoc.parser import parse

logger = logging.getLogger(__name__)

DUPLICATE = "duplicate"


@dataclass
class RejectedValue:
    """An input that failed validation, with the reason for rejection.

    ``reason`` is ``"duplicate"`` or the :class:`ErrorKind` value.
    """

    index: int
    value: str
    reason: str
    error: ErrorKind | None = None


@dataclass
class BatchStats:
    """Summary statistics from a validation pass."""

    total_input: int = 0
    valid_count: int = 0
    duplicate_count: int = 0
    invalid_count: int = 0
    by_type: Counter[DocumentType] = field(default_factory=Counter)
    by_error: Counter[ErrorKind] = field(default_factory=Counter)


@dataclass
class BatchValidationResult:
    """Result of validating a batch of values."""

    valid: list[DocumentKind] = field(default_factory=list)
    rejected: list[RejectedValue] = field(default_factory=list)
    stats: BatchStats = field(default_factory=BatchStats)


class DocumentBatchValidator:
    """Validates and deduplicates raw CPF/CNPJ values.

    Deduplication happens on the canonical number, so ``"288.111.210-27"``
    and ``"28811121027"`` count as the same document.
    """

    def validate_batch(
        self,
        values: Iterable[str],
        dedup: bool = True,
    ) -> BatchValidationResult:
        """Validate a batch of raw values.

        Args:
            values: Raw inputs, formatted or not.
            dedup: Reject repeated documents after their first occurrence.

        Returns:
            BatchValidationResult with valid documents, rejected values, and stats.
        """
        stats = BatchStats()
        valid: list[DocumentKind] = []
        rejected: list[RejectedValue] = []
        seen: set[DocumentKind] = set()

        for index, value in enumerate(values):
            stats.total_input += 1
            result = parse(value)

            if result.error is not None:
                stats.invalid_count += 1
                stats.by_error[result.error] += 1
                rejected.append(
                    RejectedValue(index=index, value=value, reason=result.error.value, error=result.error)
                )
                # Never log the value itself: it may be a real person's CPF.
                logger.warning("Value %d rejected: %s", index, result.error.value)
                continue

            document = result.unwrap()
            if dedup and document in seen:
                stats.duplicate_count += 1
                rejected.append(RejectedValue(index=index, value=value, reason=DUPLICATE))
                continue
            seen.add(document)

            stats.by_type[document.document_type] += 1
            valid.append(document)

        stats.valid_count = len(valid)

        logger.info(
            "Validation complete: %d input, %d valid, %d duplicates, %d invalid",
            stats.total_input,
            stats.valid_count,
            stats.duplicate_count,
            stats.invalid_count,
        )

        return BatchValidationResult(valid=valid, rejected=rejected, stats=stats)

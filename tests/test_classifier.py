"""Tests for the length/mask classifier and the digit sanitizer."""

from __future__ import annotations

import pytest

from brdoc.checksum import cnpj
from brdoc.classifier import (
    CNPJ_LENGTH,
    CPF_LENGTH,
    FORMATTED_CPF_AND_SANITIZED_CNPJ_SIZE,
    SANITIZED_CPF_SIZE,
    Classification,
    DocumentType,
    ExtractionMode,
    classify,
)
from brdoc.errors import ErrorKind, InvalidDocumentNumber
from brdoc.sanitizer import all_equal, extract_digits, sanitize


class TestClassify:
    def test_sanitized_cpf(self):
        assert classify("96865090039") == Classification(DocumentType.CPF, ExtractionMode.STRICT)

    def test_formatted_cpf(self):
        assert classify("288.111.210-27") == Classification(DocumentType.CPF, ExtractionMode.MASK)

    def test_fourteen_chars_without_cpf_mask_is_cnpj(self):
        """Anything 14 long that is not a formatted CPF is read as a bare CNPJ."""
        assert classify("272-676.560-21") == Classification(DocumentType.CNPJ, ExtractionMode.STRICT)

    def test_formatted_cnpj(self):
        assert classify("89.654.922/0001-26") == Classification(DocumentType.CNPJ, ExtractionMode.MASK)

    def test_eighteen_chars_without_mask(self):
        with pytest.raises(InvalidDocumentNumber) as excinfo:
            classify("66.114-935/0001-07")
        assert excinfo.value.kind is ErrorKind.INVALID_CHARACTERS

    @pytest.mark.parametrize("value", ["", "1", "2881121027", "288111221027", "6611493500107", "661149350000107"])
    def test_unrecognized_length(self, value):
        with pytest.raises(InvalidDocumentNumber, match="got") as excinfo:
            classify(value)
        assert excinfo.value.kind is ErrorKind.INVALID_INPUT

    def test_canonical_length(self):
        assert classify("96865090039").canonical_length == 11
        assert classify("03165685000114").canonical_length == 14


class TestSanitize:
    def test_strict_stops_at_first_non_digit(self):
        assert extract_digits("12a34", ExtractionMode.STRICT) == [1, 2]

    def test_mask_drops_separators(self):
        assert extract_digits("1.2/3-4", ExtractionMode.MASK) == [1, 2, 3, 4]

    def test_short_count_is_invalid_characters(self):
        with pytest.raises(InvalidDocumentNumber) as excinfo:
            sanitize("896S4922000126", classify("896S4922000126"))
        assert excinfo.value.kind is ErrorKind.INVALID_CHARACTERS

    def test_all_equal_is_invalid_document(self):
        with pytest.raises(InvalidDocumentNumber) as excinfo:
            sanitize("22222222222", classify("22222222222"))
        assert excinfo.value.kind is ErrorKind.INVALID_DOCUMENT

    def test_returns_digits(self):
        value = "288.111.210-27"
        assert sanitize(value, classify(value)) == [2, 8, 8, 1, 1, 1, 2, 1, 0, 2, 7]

    def test_all_equal(self):
        assert all_equal([3, 3, 3])
        assert not all_equal([3, 3, 4])

    @pytest.mark.parametrize("value", ["00000000000000", "00.000.000/0000-00"])
    def test_all_zero_cnpj_is_invalid_document(self, value):
        """All zeros satisfies the CNPJ check digits; uniformity still rejects it."""
        assert cnpj.compute_check_digits([0] * 12) == (0, 0)
        with pytest.raises(InvalidDocumentNumber) as excinfo:
            sanitize(value, classify(value))
        assert excinfo.value.kind is ErrorKind.INVALID_DOCUMENT


class TestLengthConstants:
    def test_shared_fourteen_char_size_is_cnpj_length(self):
        assert FORMATTED_CPF_AND_SANITIZED_CNPJ_SIZE == CNPJ_LENGTH
        assert SANITIZED_CPF_SIZE == CPF_LENGTH

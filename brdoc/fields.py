"""Pydantic field types for CPF/CNPJ columns.

Each type accepts raw or formatted input and stores the canonical digits::

    class EmpresaSchema(BaseModel):
        cnpj: CNPJNumber

    EmpresaSchema(cnpj="11.222.333/0001-81").cnpj == "11222333000181"
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator

from brdoc.document import CNPJ, CPF
from brdoc.parser import parse_or_raise


def _canonical_document(value: str) -> str:
    return parse_or_raise(value).number


def _canonical_cpf(value: str) -> str:
    document = parse_or_raise(value)
    if not isinstance(document, CPF):
        raise ValueError("expected a CPF, got a CNPJ")
    return document.number


def _canonical_cnpj(value: str) -> str:
    document = parse_or_raise(value)
    if not isinstance(document, CNPJ):
        raise ValueError("expected a CNPJ, got a CPF")
    return document.number


CPFNumber = Annotated[str, AfterValidator(_canonical_cpf)]
CNPJNumber = Annotated[str, AfterValidator(_canonical_cnpj)]
DocumentNumber = Annotated[str, AfterValidator(_canonical_document)]

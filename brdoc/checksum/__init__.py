"""Check-digit validators, one per document family."""

from brdoc.checksum import cnpj, cpf

__all__ = ["cnpj", "cpf"]

"""Exceptions raised by cngeno."""

__all__ = [
    "CngenoError",
    "GenotypePolicyError",
    "InvalidInputError",
]


class CngenoError(Exception):
    """Base class for all cngeno errors."""


class InvalidInputError(CngenoError, ValueError):
    """
    Raised when a copy-number call, reference copy number or reference allele
    is malformed.

    This signals a contract violation by the upstream caller (a bad copy-number
    estimate or bad ploidy metadata). Values are never coerced.
    """


class GenotypePolicyError(CngenoError):
    """Raised when a genotype branch is entered without its precondition holding."""

"""
Data models for cngeno.

Provides Pydantic models for alleles, genotypes, requests and configuration.
"""

from .core import (
    DEL_ALLELE,
    DUP_ALLELE,
    Allele,
    AlleleKind,
    CalledGenotype,
    DeletionAllele,
    DuplicationAllele,
    GenotypeAlleleSet,
    GenotyperConfig,
    GenotypeRequest,
    GenotypeResult,
    InvalidPolicy,
    NoCallGenotype,
    ReferenceAllele,
    Sex,
)

__all__ = [
    "DEL_ALLELE",
    "DUP_ALLELE",
    "Allele",
    "AlleleKind",
    "CalledGenotype",
    "DeletionAllele",
    "DuplicationAllele",
    "GenotypeAlleleSet",
    "GenotyperConfig",
    "GenotypeRequest",
    "GenotypeResult",
    "InvalidPolicy",
    "NoCallGenotype",
    "ReferenceAllele",
    "Sex",
]

"""
Core module for cngeno.

Provides the genotype kernel that turns copy-number calls into genotype alleles.
"""

from .genotype import (
    CopyNumberGenotypeResolver,
    PloidyCase,
    allele_for_copy_number,
    make_genotype_alleles,
)

__all__ = [
    "CopyNumberGenotypeResolver",
    "PloidyCase",
    "allele_for_copy_number",
    "make_genotype_alleles",
]

"""
cngeno - Copy-number genotype resolution for structural variant calling.

Turns an integer copy-number call for one sample at one locus into the set of
genotype alleles (reference, <DEL>, <DUP> or no-call) used in the sample's
genotype field.

Example usage:
    >>> from cngeno import make_genotype_alleles
    >>> make_genotype_alleles(1, 2, "A").display_alleles()
    ['A', '<DEL>']
"""

__version__ = "0.1.0"

from .core.genotype import CopyNumberGenotypeResolver, allele_for_copy_number, make_genotype_alleles
from .errors import CngenoError, GenotypePolicyError, InvalidInputError
from .models.core import (
    DEL_ALLELE,
    DUP_ALLELE,
    CalledGenotype,
    GenotyperConfig,
    GenotypeRequest,
    GenotypeResult,
    NoCallGenotype,
    ReferenceAllele,
)
from .pipeline import Genotyper
from .ploidy import PloidyTable

__all__ = [
    "__version__",
    "DEL_ALLELE",
    "DUP_ALLELE",
    "CalledGenotype",
    "CngenoError",
    "CopyNumberGenotypeResolver",
    "GenotypePolicyError",
    "Genotyper",
    "GenotyperConfig",
    "GenotypeRequest",
    "GenotypeResult",
    "InvalidInputError",
    "NoCallGenotype",
    "PloidyTable",
    "ReferenceAllele",
    "allele_for_copy_number",
    "make_genotype_alleles",
]

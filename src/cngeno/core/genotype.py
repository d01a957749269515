"""
Genotype Kernel: maps a copy-number call onto genotype alleles.

Given the observed copy number of a locus in one sample, the expected
(reference) copy number at that locus and the locus's reference allele,
decide which alleles make up the sample's genotype:

- Zero reference copies: no-call of ploidy 1.
- Haploid: the single haplotype carries the classified allele.
- A gain at ploidy 2 or more: no-call, since the gain cannot be placed on
  specific haplotypes.
- Diploid: homozygous deletion, heterozygous deletion or homozygous reference.
- Polyploid: intact haplotypes first, deleted haplotypes after.
"""

import logging
from enum import Enum

from ..errors import GenotypePolicyError, InvalidInputError
from ..models.core import (
    DEL_ALLELE,
    DUP_ALLELE,
    Allele,
    AlleleKind,
    CalledGenotype,
    GenotypeAlleleSet,
    NoCallGenotype,
    ReferenceAllele,
)

logger = logging.getLogger(__name__)

__all__ = [
    "CopyNumberGenotypeResolver",
    "PloidyCase",
    "allele_for_copy_number",
    "make_genotype_alleles",
]


class PloidyCase(str, Enum):
    """Mutually exclusive shapes a genotype can take, in priority order."""
    ZERO_PLOIDY = "zero_ploidy"
    HAPLOID = "haploid"
    AMBIGUOUS_GAIN = "ambiguous_gain"
    DIPLOID = "diploid"
    POLYPLOID = "polyploid"


def _check_count(name: str, value: int) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidInputError(f"{name} must be non-negative, got {value}")
    return value


def _as_reference_allele(ref_allele: str | ReferenceAllele | None) -> ReferenceAllele:
    if ref_allele is None:
        raise InvalidInputError("Reference allele is required")
    if isinstance(ref_allele, ReferenceAllele):
        return ref_allele
    if isinstance(ref_allele, str):
        if not ref_allele:
            raise InvalidInputError("Reference allele must not be empty")
        return ReferenceAllele(bases=ref_allele)
    raise InvalidInputError(f"Reference allele must be a string, got {type(ref_allele).__name__}")


class CopyNumberGenotypeResolver:
    """
    Stateless resolver from copy-number calls to genotype alleles.

    All methods are pure and may be called concurrently.
    """

    @staticmethod
    def allele_for_copy_number(
        copy_number_call: int, ref_copy_number: int, ref_allele: str | ReferenceAllele
    ) -> Allele:
        """
        Classify a copy-number call against the reference copy number.

        Args:
            copy_number_call: Observed copy number of the sample at the locus
            ref_copy_number: Expected copy number (ploidy) at the locus
            ref_allele: Reference allele of the locus

        Returns:
            DUP_ALLELE for a gain, DEL_ALLELE for a loss, otherwise the
            reference allele.

        Raises:
            InvalidInputError: If a count is negative or the reference allele is missing.
        """
        _check_count("Copy number call", copy_number_call)
        _check_count("Reference copy number", ref_copy_number)
        reference = _as_reference_allele(ref_allele)

        if copy_number_call > ref_copy_number:
            return DUP_ALLELE
        if copy_number_call < ref_copy_number:
            return DEL_ALLELE
        return reference

    @staticmethod
    def ploidy_case(copy_number_call: int, ref_copy_number: int) -> PloidyCase:
        """
        Select the genotype shape for a call. The first matching case wins.
        """
        _check_count("Copy number call", copy_number_call)
        _check_count("Reference copy number", ref_copy_number)

        if ref_copy_number == 0:
            return PloidyCase.ZERO_PLOIDY
        if ref_copy_number == 1:
            return PloidyCase.HAPLOID
        if copy_number_call > ref_copy_number:
            return PloidyCase.AMBIGUOUS_GAIN
        if ref_copy_number == 2:
            return PloidyCase.DIPLOID
        return PloidyCase.POLYPLOID

    @staticmethod
    def resolve(
        copy_number_call: int, ref_copy_number: int, ref_allele: str | ReferenceAllele
    ) -> GenotypeAlleleSet:
        """
        Build the genotype allele set for one sample at one locus.

        Args:
            copy_number_call: Observed copy number of the sample at the locus
            ref_copy_number: Expected copy number (ploidy) at the locus
            ref_allele: Reference allele of the locus

        Returns:
            A CalledGenotype with ref_copy_number alleles, or a NoCallGenotype.
            Zero reference copies give a no-call of ploidy 1.

        Raises:
            InvalidInputError: If a count is negative or the reference allele is missing.
        """
        reference = _as_reference_allele(ref_allele)
        genotype_allele = CopyNumberGenotypeResolver.allele_for_copy_number(
            copy_number_call, ref_copy_number, reference
        )
        case = CopyNumberGenotypeResolver.ploidy_case(copy_number_call, ref_copy_number)
        logger.debug(
            "Resolving CN=%d against ploidy %d: %s", copy_number_call, ref_copy_number, case.value
        )

        if case is PloidyCase.ZERO_PLOIDY:
            # Allosomes such as chrY can have no expected copies
            return NoCallGenotype(ploidy=1)

        if case is PloidyCase.HAPLOID:
            return CalledGenotype(alleles=(genotype_allele,))

        if case is PloidyCase.AMBIGUOUS_GAIN:
            if genotype_allele.kind != AlleleKind.DUPLICATION:
                raise GenotypePolicyError(
                    f"Expected a duplication for CN={copy_number_call} at ploidy {ref_copy_number}, "
                    f"got {genotype_allele.display}"
                )
            return NoCallGenotype(ploidy=ref_copy_number)

        if copy_number_call > ref_copy_number:
            raise GenotypePolicyError(
                f"{case.value} genotype requires CN <= {ref_copy_number}, got {copy_number_call}"
            )

        if case is PloidyCase.DIPLOID:
            if copy_number_call == 0:
                if genotype_allele.kind != AlleleKind.DELETION:
                    raise GenotypePolicyError(
                        f"Homozygous loss requires a deletion allele, got {genotype_allele.display}"
                    )
                return CalledGenotype(alleles=(genotype_allele, genotype_allele))
            # CN=1 gives REF/DEL, CN=2 gives REF/REF
            return CalledGenotype(alleles=(reference, genotype_allele))

        # Polyploid loss: intact haplotypes first
        alleles = (reference,) * copy_number_call + (DEL_ALLELE,) * (
            ref_copy_number - copy_number_call
        )
        return CalledGenotype(alleles=alleles)


def allele_for_copy_number(
    copy_number_call: int, ref_copy_number: int, ref_allele: str | ReferenceAllele
) -> Allele:
    """Module-level shortcut for CopyNumberGenotypeResolver.allele_for_copy_number."""
    return CopyNumberGenotypeResolver.allele_for_copy_number(
        copy_number_call, ref_copy_number, ref_allele
    )


def make_genotype_alleles(
    copy_number_call: int, ref_copy_number: int, ref_allele: str | ReferenceAllele
) -> GenotypeAlleleSet:
    """Module-level shortcut for CopyNumberGenotypeResolver.resolve."""
    return CopyNumberGenotypeResolver.resolve(copy_number_call, ref_copy_number, ref_allele)

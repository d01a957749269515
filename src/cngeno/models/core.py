"""
Core data models for cngeno.
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Symbolic allele names as written in SV VCFs
DEL_DISPLAY = "<DEL>"
DUP_DISPLAY = "<DUP>"
NO_CALL_DISPLAY = "."


class AlleleKind(str, Enum):
    """Kind of a genotype allele."""
    REFERENCE = "REF"
    DELETION = "DEL"
    DUPLICATION = "DUP"


class ReferenceAllele(BaseModel):
    """
    The locus's reference allele.

    The payload is opaque to cngeno; it is usually the reference base sequence.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["REF"] = "REF"
    bases: str = Field(min_length=1, description="Reference allele payload")

    @property
    def display(self) -> str:
        return self.bases

    @property
    def is_reference(self) -> bool:
        return True

    @property
    def is_symbolic(self) -> bool:
        return False


class DeletionAllele(BaseModel):
    """Symbolic copy-number loss."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["DEL"] = "DEL"

    @property
    def display(self) -> str:
        return DEL_DISPLAY

    @property
    def is_reference(self) -> bool:
        return False

    @property
    def is_symbolic(self) -> bool:
        return True


class DuplicationAllele(BaseModel):
    """Symbolic copy-number gain."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["DUP"] = "DUP"

    @property
    def display(self) -> str:
        return DUP_DISPLAY

    @property
    def is_reference(self) -> bool:
        return False

    @property
    def is_symbolic(self) -> bool:
        return True


Allele = Annotated[
    ReferenceAllele | DeletionAllele | DuplicationAllele,
    Field(discriminator="kind"),
]

DEL_ALLELE = DeletionAllele()
DUP_ALLELE = DuplicationAllele()


class CalledGenotype(BaseModel):
    """
    Per-haplotype allele assignment for one sample at one locus.

    The number of alleles is the genotype's ploidy.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["called"] = "called"
    alleles: tuple[Allele, ...] = Field(min_length=1)

    @property
    def ploidy(self) -> int:
        return len(self.alleles)

    @property
    def is_no_call(self) -> bool:
        return False

    def display_alleles(self) -> list[str]:
        return [allele.display for allele in self.alleles]


class NoCallGenotype(BaseModel):
    """
    Genotype whose ploidy is known but whose per-haplotype alleles are not.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["no_call"] = "no_call"
    ploidy: int = Field(ge=1)

    @property
    def is_no_call(self) -> bool:
        return True

    def display_alleles(self) -> list[str]:
        return [NO_CALL_DISPLAY] * self.ploidy


GenotypeAlleleSet = Annotated[
    CalledGenotype | NoCallGenotype,
    Field(discriminator="kind"),
]


class Sex(str, Enum):
    """Karyotypic sex used to derive allosome ploidy."""
    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"


class GenotypeRequest(BaseModel):
    """
    One (sample, locus) pair to genotype.

    Counts are stored as given and checked by the resolver, not here, so
    that malformed values (bools, strings, floats) surface as
    InvalidInputError instead of being coerced to int.
    """
    sample: str
    contig: str
    start: int = Field(default=0, ge=0, description="0-based start of the locus")
    end: int | None = Field(default=None, description="0-based exclusive end of the locus")
    copy_number: Any
    reference_allele: str
    # When unset, the ploidy table decides
    reference_copy_number: Any = None

    @model_validator(mode="after")
    def validate_interval(self) -> "GenotypeRequest":
        if self.end is not None and self.end < self.start:
            raise ValueError(f"End position ({self.end}) must be >= start position ({self.start})")
        return self

    @property
    def locus(self) -> str:
        if self.end is None:
            return f"{self.contig}:{self.start}"
        return f"{self.contig}:{self.start}-{self.end}"


class GenotypeResult(BaseModel):
    """A request together with its resolved genotype."""
    request: GenotypeRequest
    reference_copy_number: int
    genotype: GenotypeAlleleSet


class InvalidPolicy(str, Enum):
    """What batch genotyping does with a request that fails validation."""
    RAISE = "raise"
    SKIP = "skip"


class GenotyperConfig(BaseModel):
    """
    Configuration for batch genotyping.
    """
    threads: int = Field(default=1, ge=1)
    on_invalid: InvalidPolicy = InvalidPolicy.RAISE
    # Number of skipped requests reported individually before summarizing
    max_warnings: int = Field(default=5, ge=0)
    show_progress: bool = False

"""Reference copy number (ploidy) lookup per sample and contig."""

import csv
import logging
from pathlib import Path

from pydantic import BaseModel, Field, StrictInt, field_validator

from .errors import InvalidInputError
from .models.core import Sex

logger = logging.getLogger(__name__)

__all__ = ["PloidyTable", "normalize_contig"]

MITOCHONDRIAL_CONTIGS = {"M", "MT"}

# (X, Y) ploidy by sex
ALLOSOME_PLOIDY = {
    Sex.MALE: (1, 1),
    Sex.FEMALE: (2, 0),
}


def normalize_contig(contig: str) -> str:
    """
    Normalize contig name for case-insensitive matching.

    Removes a 'chr' prefix in any case and upper-cases the rest,
    so 'chrx', 'ChrX' and 'X' all become 'X'.
    """
    if contig.lower().startswith("chr"):
        contig = contig[3:]
    return contig.upper()


class PloidyTable(BaseModel):
    """
    Expected copy number for each (sample, contig).

    Lookup order:
    1. Explicit (sample, contig) override
    2. Allosomes (X/Y) from the sample's sex
    3. Mitochondrial contigs are haploid
    4. default_ploidy
    """

    default_ploidy: StrictInt = Field(default=2, ge=0)
    sample_sex: dict[str, Sex] = Field(default_factory=dict)
    overrides: dict[tuple[str, str], StrictInt] = Field(default_factory=dict)

    @field_validator("overrides")
    @classmethod
    def validate_overrides(cls, v: dict[tuple[str, str], int]) -> dict[tuple[str, str], int]:
        normalized = {}
        for (sample, contig), ploidy in v.items():
            if ploidy < 0:
                raise ValueError(f"Ploidy for {sample}/{contig} must be non-negative, got {ploidy}")
            normalized[(sample, normalize_contig(contig))] = ploidy
        return normalized

    def set_ploidy(self, sample: str, contig: str, ploidy: int) -> None:
        """Record an explicit ploidy for one sample and contig."""
        if isinstance(ploidy, bool) or not isinstance(ploidy, int) or ploidy < 0:
            raise InvalidInputError(
                f"Ploidy for {sample}/{contig} must be a non-negative integer, got {ploidy!r}"
            )
        self.overrides[(sample, normalize_contig(contig))] = ploidy

    def get_ploidy(self, sample: str, contig: str) -> int:
        """
        Get the reference copy number of a contig for a sample.

        Args:
            sample: Sample name
            contig: Contig name, with or without 'chr' prefix

        Returns:
            Expected copy number
        """
        norm_contig = normalize_contig(contig)
        override = self.overrides.get((sample, norm_contig))
        if override is not None:
            return override

        if norm_contig in ("X", "Y"):
            sex = self.sample_sex.get(sample, Sex.UNKNOWN)
            if sex in ALLOSOME_PLOIDY:
                x_ploidy, y_ploidy = ALLOSOME_PLOIDY[sex]
                return x_ploidy if norm_contig == "X" else y_ploidy
            return self.default_ploidy

        if norm_contig in MITOCHONDRIAL_CONTIGS:
            return 1

        return self.default_ploidy

    @classmethod
    def from_tsv(
        cls,
        path: Path,
        default_ploidy: int = 2,
        sample_sex: dict[str, Sex] | None = None,
    ) -> "PloidyTable":
        """
        Load explicit ploidies from a tab-separated file.

        The file needs a header with 'sample', 'contig' and 'ploidy' columns.
        Lines starting with '#' are skipped.

        Raises:
            InvalidInputError: If a row is missing a column or has a bad ploidy.
        """
        table = cls(default_ploidy=default_ploidy, sample_sex=sample_sex or {})

        with open(path) as f:
            # Keep 1-based file line numbers for error messages
            numbered = [
                (line_no, line)
                for line_no, line in enumerate(f, start=1)
                if line.strip() and not line.startswith("#")
            ]

        reader = csv.DictReader((line for _, line in numbered), delimiter="\t")
        missing = {"sample", "contig", "ploidy"} - set(reader.fieldnames or [])
        if missing:
            raise InvalidInputError(
                f"Ploidy table {path} is missing columns: {', '.join(sorted(missing))}"
            )

        # First numbered line is the header
        for (line_no, _), row in zip(numbered[1:], reader):
            if not row["sample"] or not row["contig"]:
                raise InvalidInputError(f"Missing sample or contig in {path} (line {line_no})")
            try:
                ploidy = int(row["ploidy"])
            except (TypeError, ValueError) as e:
                raise InvalidInputError(
                    f"Bad ploidy {row['ploidy']!r} in {path} (line {line_no})"
                ) from e
            table.set_ploidy(row["sample"], row["contig"], ploidy)

        logger.debug("Loaded %d ploidy overrides from %s", len(table.overrides), path)
        return table

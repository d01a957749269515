"""
Pipeline Orchestrator: genotypes many (sample, locus) requests.

This module handles:
1. Deriving the reference copy number of each request (explicit or ploidy table).
2. Resolving each request independently, in parallel with joblib.
3. Applying the invalid-input policy (raise on the first bad request, or skip it).
"""

import logging
from collections.abc import Iterable

from joblib import Parallel, delayed
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)

from .core.genotype import CopyNumberGenotypeResolver
from .errors import InvalidInputError
from .models.core import GenotyperConfig, GenotypeRequest, GenotypeResult, InvalidPolicy
from .ploidy import PloidyTable
from .utils.logging import log_call, timed

logger = logging.getLogger(__name__)

# (result, error) for one request; exactly one is set
_Outcome = tuple[GenotypeResult | None, InvalidInputError | None]


class Genotyper:
    def __init__(self, config: GenotyperConfig | None = None, ploidy_table: PloidyTable | None = None):
        self.config = config or GenotyperConfig()
        self.ploidy_table = ploidy_table or PloidyTable()

    def reference_copy_number(self, request: GenotypeRequest) -> int:
        """Expected copy number for the request's sample and contig."""
        if request.reference_copy_number is not None:
            return request.reference_copy_number
        return self.ploidy_table.get_ploidy(request.sample, request.contig)

    def genotype(self, request: GenotypeRequest) -> GenotypeResult:
        """
        Resolve the genotype of a single request.

        Raises:
            InvalidInputError: If the request's counts or reference allele are malformed.
        """
        ref_copy_number = self.reference_copy_number(request)
        genotype = CopyNumberGenotypeResolver.resolve(
            request.copy_number, ref_copy_number, request.reference_allele
        )
        return GenotypeResult(
            request=request, reference_copy_number=ref_copy_number, genotype=genotype
        )

    def _genotype_or_error(self, request: GenotypeRequest) -> _Outcome:
        try:
            return self.genotype(request), None
        except InvalidInputError as e:
            return None, e

    @log_call()
    def genotype_many(self, requests: Iterable[GenotypeRequest]) -> list[GenotypeResult]:
        """
        Resolve many requests. Results keep the input order.

        Args:
            requests: Requests to genotype

        Returns:
            One result per request; skipped requests are left out.

        Raises:
            InvalidInputError: On the first invalid request when on_invalid is 'raise'.
        """
        items = list(requests)
        with timed(f"Genotyping {len(items)} requests", logger):
            outcomes = self._map(items)

        results = []
        skipped = 0
        for request, (result, error) in zip(items, outcomes):
            if error is None:
                results.append(result)
                continue

            if self.config.on_invalid == InvalidPolicy.RAISE:
                raise error

            skipped += 1
            if skipped <= self.config.max_warnings:
                logger.warning(
                    "Skipping %s at %s: %s", request.sample, request.locus, error
                )

        if skipped > self.config.max_warnings:
            logger.warning("... and %d more invalid requests.", skipped - self.config.max_warnings)

        logger.info("Genotyped %d / %d requests", len(results), len(items))
        return results

    def _map(self, items: list[GenotypeRequest]) -> list[_Outcome]:
        """Map _genotype_or_error over items using joblib threads."""
        if not self.config.show_progress:
            return Parallel(n_jobs=self.config.threads, backend="threading")(
                delayed(self._genotype_or_error)(item) for item in items
            )

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
        ) as progress:
            task = progress.add_task("[cyan]Genotyping...", total=len(items))

            outcomes = []
            with Parallel(n_jobs=self.config.threads, backend="threading") as parallel:
                for outcome in parallel(delayed(self._genotype_or_error)(item) for item in items):
                    outcomes.append(outcome)
                    progress.update(task, advance=1)

            return outcomes

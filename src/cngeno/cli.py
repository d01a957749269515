"""
CLI Entry Point: resolves a single copy-number call from the command line.
"""

from pathlib import Path

import typer
from rich.console import Console

from . import __version__
from .errors import InvalidInputError
from .models.core import GenotypeRequest, Sex
from .pipeline import Genotyper
from .ploidy import PloidyTable
from .utils.logging import setup_logging

app = typer.Typer(help="cngeno: copy-number genotype resolution")


@app.callback()
def main():
    """
    cngeno: copy-number genotype resolution
    """
    pass


@app.command()
def version():
    """Print the cngeno version."""
    typer.echo(f"cngeno {__version__}")


@app.command()
def resolve(
    copy_number: int = typer.Option(
        ..., "--copy-number", "-c", help="Observed copy number of the sample at the locus"
    ),
    ref_allele: str = typer.Option(..., "--ref-allele", "-r", help="Reference allele of the locus"),
    ref_copy_number: int | None = typer.Option(
        None,
        "--ref-copy-number",
        "-p",
        help="Expected copy number at the locus. Derived from --contig/--sex when omitted.",
    ),
    contig: str = typer.Option("1", "--contig", help="Contig of the locus"),
    sample: str = typer.Option("SAMPLE", "--sample", "-s", help="Sample name"),
    sex: Sex = typer.Option(Sex.UNKNOWN, "--sex", help="Sample sex, used for X/Y ploidy"),
    ploidy_file: Path | None = typer.Option(
        None, "--ploidy-table", help="TSV with sample, contig and ploidy columns"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable verbose debug logging"),
):
    """
    Print the genotype alleles for one copy-number call.
    """
    setup_logging(verbose=verbose)
    console = Console()

    try:
        if ploidy_file is not None:
            if not ploidy_file.exists():
                console.print(f"[bold red]Error: ploidy table not found: {ploidy_file}[/bold red]")
                raise typer.Exit(code=1)
            ploidy_table = PloidyTable.from_tsv(ploidy_file, sample_sex={sample: sex})
        else:
            ploidy_table = PloidyTable(sample_sex={sample: sex})

        request = GenotypeRequest(
            sample=sample,
            contig=contig,
            copy_number=copy_number,
            reference_allele=ref_allele,
            reference_copy_number=ref_copy_number,
        )
        result = Genotyper(ploidy_table=ploidy_table).genotype(request)

    except InvalidInputError as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1) from e

    typer.echo(" ".join(result.genotype.display_alleles()))


if __name__ == "__main__":
    app()

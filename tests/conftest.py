"""Pytest configuration and fixtures."""

import logging
import sys
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src directory to path so tests use local code, not installed package
project_root = Path(__file__).parent.parent
src_dir = project_root / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from cngeno.models.core import GenotypeRequest  # noqa: E402
from cngeno.utils.logging import PACKAGE_LOGGER  # noqa: E402


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo setup_logging so caplog sees cngeno records in every test."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def ploidy_tsv(temp_dir: Path) -> Path:
    """Create a ploidy table with one triploid contig and one nullisomic chrX."""
    path = temp_dir / "ploidy.tsv"

    with open(path, "w") as f:
        f.write("# sample ploidy overrides\n")
        f.write("sample\tcontig\tploidy\n")
        f.write("sample1\tchr21\t3\n")
        f.write("sample2\tchrX\t0\n")

    return path


@pytest.fixture
def mixed_requests() -> list[GenotypeRequest]:
    """Requests covering every genotype shape, plus one invalid call."""
    return [
        GenotypeRequest(sample="sample1", contig="chr1", start=100, end=5000, copy_number=2, reference_allele="A"),
        GenotypeRequest(sample="sample1", contig="chr1", start=100, end=5000, copy_number=1, reference_allele="A"),
        GenotypeRequest(sample="sample1", contig="chr1", start=100, end=5000, copy_number=-1, reference_allele="A"),
        GenotypeRequest(sample="sample1", contig="chr1", start=100, end=5000, copy_number=4, reference_allele="A"),
        GenotypeRequest(
            sample="sample1", contig="chr4", start=200, copy_number=3, reference_allele="C", reference_copy_number=4
        ),
    ]

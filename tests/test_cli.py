"""Tests for CLI module."""

from typer.testing import CliRunner

from cngeno import __version__
from cngeno.cli import app

runner = CliRunner()


def test_cli_version():
    """Test version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert f"cngeno {__version__}" in result.stdout


def test_cli_help():
    """Test help command."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "resolve" in result.stdout


def test_cli_heterozygous_deletion():
    result = runner.invoke(app, ["resolve", "--copy-number", "1", "--ref-copy-number", "2", "--ref-allele", "A"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "A <DEL>"


def test_cli_ambiguous_gain():
    result = runner.invoke(app, ["resolve", "-c", "5", "-p", "3", "-r", "T"])
    assert result.exit_code == 0
    assert result.stdout.strip() == ". . ."


def test_cli_ploidy_from_sex():
    """Female chrY has no expected copies."""
    result = runner.invoke(
        app, ["resolve", "-c", "0", "-r", "A", "--contig", "chrY", "--sex", "female"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "."


def test_cli_ploidy_table(ploidy_tsv):
    result = runner.invoke(
        app,
        [
            "resolve",
            "-c",
            "2",
            "-r",
            "G",
            "--sample",
            "sample1",
            "--contig",
            "chr21",
            "--ploidy-table",
            str(ploidy_tsv),
        ],
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "G G <DEL>"


def test_cli_missing_ploidy_table(temp_dir):
    result = runner.invoke(
        app, ["resolve", "-c", "2", "-r", "G", "--ploidy-table", str(temp_dir / "missing.tsv")]
    )
    assert result.exit_code == 1
    assert "Error" in result.stdout


def test_cli_negative_copy_number():
    result = runner.invoke(app, ["resolve", "--copy-number=-1", "--ref-copy-number=2", "-r", "A"])
    assert result.exit_code == 1
    assert "Error" in result.stdout


def test_cli_missing_required_args():
    result = runner.invoke(app, ["resolve", "-c", "1"])
    assert result.exit_code != 0

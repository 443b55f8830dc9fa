"""Test suite for filterRPF CLI functionality."""

import pandas as pd
import pytest
from click.testing import CliRunner
from filterRPF.cli import cli


@pytest.fixture
def test_data(tmp_path, periodic_reads):
    """Write a periodic read table in a temporary directory."""
    test_file = tmp_path / "WT.tsv"
    periodic_reads.to_csv(test_file, sep="\t", index=False)
    return test_file


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


def test_version(runner):
    """Test CLI version command."""
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_help(runner):
    """Test CLI help command."""
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "filterRPF" in result.output
    assert "length-filter" in result.output


class TestLengthFilter:
    """Test suite for the length-filter command."""

    def test_custom(self, runner, test_data, tmp_path):
        output = tmp_path / "out"
        result = runner.invoke(
            cli,
            ["length-filter", str(test_data), "-m", "custom", "-l", "29:30", "-o", str(output)],
        )
        assert result.exit_code == 0, result.output
        assert "WT: kept 200 of 300 reads" in result.output

        filtered = pd.read_csv(output / "WT.filtered.tsv", sep="\t")
        assert set(filtered["length"]) == {29, 30}

    def test_periodicity(self, runner, test_data, tmp_path):
        output = tmp_path / "out"
        result = runner.invoke(
            cli,
            [
                "length-filter",
                str(test_data),
                "--mode",
                "periodicity",
                "--threshold",
                "70",
                "--periodicity-report",
                "--output",
                str(output),
            ],
        )
        assert result.exit_code == 0, result.output
        assert "WT: kept 100 of 300 reads (66.67% removed)" in result.output
        assert (output / "WT.periodicity.tsv").exists()
        assert (output / "length_filter_report.txt").exists()

    def test_config_file(self, runner, test_data, tmp_path):
        """Options on the command line override the config file."""
        config = tmp_path / "params.yaml"
        config.write_text("mode: periodicity\nthreshold: 90\n")
        output = tmp_path / "out"

        result = runner.invoke(
            cli,
            ["length-filter", str(test_data), "-c", str(config), "-t", "70", "-o", str(output)],
        )
        assert result.exit_code == 0, result.output
        assert "WT: kept 100 of 300 reads" in result.output

    def test_as_ranges(self, runner, test_data, tmp_path):
        output = tmp_path / "out"
        result = runner.invoke(
            cli,
            ["length-filter", str(test_data), "-m", "custom", "-l", "28", "--as-ranges", "-o", str(output)],
        )
        assert result.exit_code == 0, result.output
        assert (output / "WT.filtered.bed").exists()
        assert not (output / "WT.filtered.tsv").exists()

    def test_flags_switch_off_config(self, runner, test_data, tmp_path):
        """--no-* flags turn off options enabled in the config file."""
        config = tmp_path / "params.yaml"
        config.write_text(
            "mode: periodicity\nthreshold: 70\nas_ranges: true\nperiodicity_report: true\n"
        )
        output = tmp_path / "out"

        result = runner.invoke(
            cli,
            [
                "length-filter",
                str(test_data),
                "-c",
                str(config),
                "--no-as-ranges",
                "--no-periodicity-report",
                "-o",
                str(output),
            ],
        )
        assert result.exit_code == 0, result.output
        assert (output / "WT.filtered.tsv").exists()
        assert not (output / "WT.filtered.bed").exists()
        assert not (output / "WT.periodicity.tsv").exists()

    def test_missing_mode(self, runner, test_data, tmp_path):
        result = runner.invoke(cli, ["length-filter", str(test_data), "-o", str(tmp_path / "out")])
        assert result.exit_code != 0
        assert "--mode is required" in result.output

    def test_invalid_mode(self, runner, test_data, tmp_path):
        result = runner.invoke(
            cli, ["length-filter", str(test_data), "-m", "random", "-o", str(tmp_path / "out")]
        )
        assert result.exit_code != 0
        assert "Invalid value for '--mode'" in result.output

    def test_invalid_threshold(self, runner, test_data, tmp_path):
        result = runner.invoke(
            cli,
            ["length-filter", str(test_data), "-m", "periodicity", "-t", "5", "-o", str(tmp_path / "out")],
        )
        assert result.exit_code != 0
        assert "between 10 and 100" in str(result.exception)

    def test_custom_without_lengths(self, runner, test_data, tmp_path):
        result = runner.invoke(
            cli, ["length-filter", str(test_data), "-m", "custom", "-o", str(tmp_path / "out")]
        )
        assert result.exit_code != 0
        assert "length set is required" in str(result.exception)

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(
            cli, ["length-filter", "nonexistent.tsv", "-m", "custom", "-l", "28", "-o", str(tmp_path)]
        )
        assert result.exit_code != 0
        assert "does not exist" in result.output

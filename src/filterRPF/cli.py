"""Command Line Interface for filterRPF.

This module implements the command-line interface for filterRPF
(Filter Ribosome Protected Fragments), a tool for selecting the read
lengths of Ribo-seq experiments worth keeping for downstream analysis.

The CLI is built using Click and provides a hierarchical command structure:

Main Commands:
    length-filter: Keep reads by custom lengths or by periodicity

Key Features:
    - Processes several samples in one call
    - Handles both gzipped and uncompressed read tables
    - Infers periodic read lengths from 5' and 3' read ends
    - Optional YAML configuration file

Examples:
    Keep reads of 27 to 30 nt:
        $ filterRPF length-filter WT.tsv KO.tsv --mode custom \
            --lengths 27:30 --output filtered/

    Keep read lengths with at least 70% of read ends in one frame:
        $ filterRPF length-filter WT.tsv KO.tsv --mode periodicity \
            --threshold 70 --output filtered/ --periodicity-report

Notes:
    - Read tables are tab-separated with a header line and the columns
      transcript, end5, end3, length, start_pos, stop_pos and strand
    - Options given on the command line override the configuration file
"""

from pathlib import Path
from typing import Optional, Tuple

import click

from . import __version__
from .core.config import FilterConfig
from .core.handlers import handle_length_filter
from .core.processors.types import LengthFilterMode
from .utils.logging import setup_logging


@click.group()
@click.version_option(version=__version__)
def cli():
    """filterRPF - Ribosome Protected Fragment length filtering.

    This is the main entry point for the filterRPF command-line interface.

    The tool focuses on:
        - Keeping user-selected read lengths
        - Detecting read lengths with trinucleotide periodicity
        - Reporting reads removed per sample
    """
    pass


@cli.command()
@click.argument(
    "input_files", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output directory for filtered reads and reports",
    required=True,
)
@click.option(
    "--mode",
    "-m",
    type=click.Choice([m.value for m in LengthFilterMode]),
    help="How to select read lengths to keep",
    default=None,
)
@click.option(
    "--lengths",
    "-l",
    help="Read lengths to keep in custom mode. "
    'Examples: "28", "27:30", "25,27-30"',
    default=None,
)
@click.option(
    "--threshold",
    "-t",
    type=int,
    help="Minimum percentage of read ends in one frame (10-100). Default is 50.",
    default=None,
)
@click.option(
    "--as-ranges/--no-as-ranges",
    default=None,
    help="Write filtered reads as BED intervals (overrides --config)",
)
@click.option(
    "--periodicity-report/--no-periodicity-report",
    default=None,
    help="Write per-sample frame counts in periodicity mode (overrides --config)",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="YAML file with filter parameters",
    default=None,
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Logging level",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Optional log file",
)
def length_filter(
    input_files: Tuple[Path, ...],
    output: Path,
    mode: Optional[str] = None,
    lengths: Optional[str] = None,
    threshold: Optional[int] = None,
    as_ranges: Optional[bool] = None,
    periodicity_report: Optional[bool] = None,
    config: Optional[Path] = None,
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
):
    """Filter reads by length.

    In custom mode only the read lengths given with --lengths are kept.
    In periodicity mode, for each read length the 5' and 3' read ends on
    the CDS are assigned to one of three frames; lengths are kept when some
    frame holds at least --threshold percent of the reads at both ends.

    Examples:
        # Keep reads of 27 to 30 nt
        filterRPF length-filter WT.tsv -m custom -l 27:30 -o filtered/

        # Keep periodic read lengths and write BED intervals
        filterRPF length-filter WT.tsv -m periodicity -t 70 -o filtered/ --as-ranges

        # Read parameters from a file
        filterRPF length-filter WT.tsv KO.tsv -c params.yaml -o filtered/
    """
    setup_logging(log_level=log_level, log_file=log_file)

    filter_config = FilterConfig.from_yaml(config) if config else FilterConfig()
    filter_config = filter_config.merge(
        mode=mode,
        length_set=lengths,
        threshold=threshold,
        as_ranges=as_ranges,
        periodicity_report=periodicity_report,
    )
    if filter_config.mode is None:
        raise click.UsageError("--mode is required when not set in --config")

    results = handle_length_filter(
        input_files=input_files, output=output, config=filter_config
    )

    for name, result in results.items():
        s = result.summary
        click.echo(
            f"{name}: kept {s.reads_after} of {s.reads_before} reads "
            f"({s.percent_removed:.2f}% removed)"
        )
    click.echo(f"Report: {output / 'length_filter_report.txt'}")


if __name__ == "__main__":
    cli()

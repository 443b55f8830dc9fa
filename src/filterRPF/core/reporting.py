"""Reporting for length filtering.

Provides:
1. LoggingReporter, an observer that logs per-sample read counts.
2. Text report and periodicity table writers.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .processors.periodicity import periodicity_table
from .processors.types import FilterSummary, PeriodicityResult, SampleFilterResult

logger = logging.getLogger(__name__)


def _millions(n: float) -> str:
    return f"{n / 1_000_000:.2f}"


class LoggingReporter:
    """Observer that logs read counts as each sample is filtered."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger
        self.summaries: Dict[str, FilterSummary] = {}

    def __call__(self, sample: str, summary: FilterSummary) -> None:
        self.summaries[sample] = summary
        self.log.info(f"processing {sample}")
        self.log.info(f"reads: {_millions(summary.reads_before)} M")
        self.log.info(
            f"{_millions(summary.reads_removed)} M  "
            f"({summary.percent_removed:.2f} %) reads removed: length filter applied"
        )
        self.log.info(f"reads (kept): {_millions(summary.reads_after)} M")


def _format_lengths(lengths) -> str:
    return ", ".join(str(x) for x in sorted(lengths)) if lengths else "none"


def write_filter_report(
    results: Mapping[str, SampleFilterResult],
    output: Path,
    params: Optional[Dict[str, Any]] = None,
) -> None:
    """Write length filter results to a file.

    Args:
        results: Mapping of sample name to SampleFilterResult
        output: Path where to write the report
        params: Filter parameters to record in the header
    """
    with open(output, "w") as f:
        f.write("=== Length Filter Results ===\n\n")

        if params:
            f.write("Parameters:\n")
            for key, value in params.items():
                f.write(f"  {key}: {value}\n")
            f.write("\n")

        f.write("Sample Summary:\n")
        for name, result in results.items():
            s = result.summary
            f.write(
                f"{name:30} kept {s.reads_after}/{s.reads_before} "
                f"({s.percent_removed:.2f}% removed)\n"
            )

        f.write("\nDetailed Results:\n")
        for name, result in results.items():
            f.write(f"\n{name}:\n")
            for key, value in result.summary.as_dict().items():
                if isinstance(value, float):
                    f.write(f"  {key}: {value:.2f}\n")
                else:
                    f.write(f"  {key}: {value}\n")
            f.write(f"  lengths_kept: {_format_lengths(result.lengths)}\n")

            periodicity = result.periodicity
            if periodicity is not None:
                f.write(f"  periodic_5prime: {_format_lengths(periodicity.accepted_end5)}\n")
                f.write(f"  periodic_3prime: {_format_lengths(periodicity.accepted_end3)}\n")

    logger.info(f"Length filter report written to {output}")


def write_periodicity_table(result: PeriodicityResult, output: Path) -> None:
    """Write per (end, length, frame) counts and percentages as TSV."""
    periodicity_table(result).to_csv(output, sep="\t", index=False)
    logger.info(f"Periodicity table written to {output}")

"""Core handlers for filterRPF functionality.

This module implements the main processing logic for filterRPF commands,
serving as an intermediary layer between the CLI and the core modules.

The handlers follow a consistent pattern:
1. Validate inputs and options
2. Load the read tables of every sample
3. Filter all samples
4. Write filtered reads and reports
"""

import logging
from collections import OrderedDict
from pathlib import Path
from typing import Dict, Iterable, Optional

from .config import FilterConfig
from .length_filter import LengthFilter
from .processors.types import LengthFilterMode, SampleFilterResult
from .reporting import LoggingReporter, write_filter_report, write_periodicity_table
from ..utils.file_utils import read_table, sample_name, write_ranges_bed, write_table

logger = logging.getLogger(__name__)


def handle_length_filter(
    input_files: Iterable[Path],
    output: Path,
    config: FilterConfig,
) -> Dict[str, SampleFilterResult]:
    """Handle the length filter command workflow.

    Args:
        input_files: Tab-separated read tables, one per sample
        output: Output directory
        config: Filter parameters

    Returns:
        Mapping of sample name to SampleFilterResult
    """
    input_files = list(input_files)
    logger.info(f"Starting length filter on {len(input_files)} samples")

    try:
        reporter = LoggingReporter()
        length_filter = LengthFilter(
            mode=config.mode,
            length_set=config.length_set,
            threshold=config.threshold,
            as_ranges=config.as_ranges,
            observer=reporter,
        )

        data = OrderedDict()
        for path in input_files:
            name = sample_name(path)
            if name in data:
                raise ValueError(f"Duplicate sample name '{name}' from {path}")
            data[name] = read_table(path)

        results = length_filter.filter_samples(data)

        output.mkdir(parents=True, exist_ok=True)
        for name, result in results.items():
            if config.as_ranges:
                out_path = output / f"{name}.filtered.bed"
                write_ranges_bed(result.table, out_path)
            else:
                out_path = output / f"{name}.filtered.tsv"
                write_table(result.table, out_path)
            logger.info(f"Filtered reads for {name} written to {out_path}")

            if (
                config.periodicity_report
                and length_filter.mode is LengthFilterMode.PERIODICITY
            ):
                write_periodicity_table(
                    result.periodicity, output / f"{name}.periodicity.tsv"
                )

        write_filter_report(
            results, output / "length_filter_report.txt", params=_report_params(length_filter)
        )

        logger.info("Length filter completed successfully")
        return results

    except Exception as e:
        logger.error(f"Length filter failed: {str(e)}")
        raise RuntimeError(f"Length filter failed: {str(e)}") from e


def _report_params(length_filter: LengthFilter) -> Dict[str, Optional[object]]:
    params = {"mode": length_filter.mode.value}
    if length_filter.mode is LengthFilterMode.CUSTOM:
        params["length_set"] = ", ".join(str(x) for x in sorted(length_filter.length_set))
    else:
        params["threshold"] = length_filter.threshold
    params["as_ranges"] = length_filter.as_ranges
    return params

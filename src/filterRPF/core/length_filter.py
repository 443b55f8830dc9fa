"""Length filtering of ribosome profiling reads.

Reads can be kept either by an explicit set of lengths ("custom" mode) or by
the lengths whose read ends show trinucleotide periodicity along the CDS
("periodicity" mode). In periodicity mode the 5' and 3' ends are evaluated
independently with the same threshold and only lengths passing at both ends
are kept.

All parameters, and the columns of every sample, are validated before any
sample is filtered, so a bad call never yields partial results.
"""

import logging
from collections import OrderedDict
from typing import Callable, Dict, Iterable, Mapping, Optional, Union

import pandas as pd

from .processors.periodicity import evaluate_periodicity
from .processors.selector import select_lengths
from .processors.types import FilterSummary, LengthFilterMode, SampleFilterResult
from .ranges import to_ranges
from ..utils.validation import (
    validate_length_set,
    validate_mode,
    validate_read_table,
    validate_threshold,
)

logger = logging.getLogger(__name__)

# Called as observer(sample_name, summary) once a sample has been filtered
FilterObserver = Callable[[str, FilterSummary], None]


class LengthFilter:
    """Filters read tables by read length."""

    def __init__(
        self,
        mode: Union[str, LengthFilterMode],
        length_set: Optional[Iterable[int]] = None,
        threshold: int = 50,
        as_ranges: bool = False,
        observer: Optional[FilterObserver] = None,
    ):
        """Initialize the LengthFilter.

        Args:
            mode: "custom" or "periodicity"
            length_set: Read lengths to keep (custom mode only)
            threshold: Minimum percentage of reads in one frame, in [10, 100]
                (periodicity mode only)
            as_ranges: Return ReadRanges instead of tables
            observer: Optional callback receiving each sample's FilterSummary

        Raises:
            InvalidMode: If mode is not supported
            InvalidLengthSet: If length_set is invalid in custom mode
            InvalidThreshold: If threshold is invalid in periodicity mode
        """
        self.mode = validate_mode(mode)
        self.length_set = None
        self.threshold = None
        if self.mode is LengthFilterMode.CUSTOM:
            self.length_set = validate_length_set(length_set)
        else:
            self.threshold = validate_threshold(threshold)
        self.as_ranges = as_ranges
        self.observer = observer

    def filter_sample(self, name: str, table: pd.DataFrame) -> SampleFilterResult:
        """Filter the reads of a single sample.

        Args:
            name: Sample name
            table: Read table of the sample

        Returns:
            SampleFilterResult with the filtered table and read counts
        """
        result = self._filter(name, table)
        self._notify(result)
        return result

    def _filter(self, name: str, table: pd.DataFrame) -> SampleFilterResult:
        validate_read_table(name, table, self.mode, as_ranges=self.as_ranges)
        logger.debug(f"processing {name}")

        periodicity = None
        if self.mode is LengthFilterMode.CUSTOM:
            keep = set(self.length_set)
        else:
            periodicity = evaluate_periodicity(table, self.threshold)
            keep = periodicity.selected

        filtered, summary = select_lengths(table, keep)
        output = to_ranges(filtered, sample=name) if self.as_ranges else filtered
        return SampleFilterResult(
            sample=name,
            table=output,
            summary=summary,
            lengths=keep,
            periodicity=periodicity,
        )

    def _notify(self, result: SampleFilterResult) -> None:
        if self.observer is not None:
            self.observer(result.sample, result.summary)

    def filter_samples(
        self, data: Mapping[str, pd.DataFrame]
    ) -> Dict[str, SampleFilterResult]:
        """Filter every sample, preserving the order of ``data``.

        The observer is only called once every sample has been filtered.

        Raises:
            MissingColumnsError: If any sample lacks required columns; no
                sample is filtered in that case
            LengthFilterError: If a sample cannot be converted to ranges;
                no sample is reported in that case
        """
        for name, table in data.items():
            validate_read_table(name, table, self.mode, as_ranges=self.as_ranges)

        results = OrderedDict()
        for name, table in data.items():
            results[name] = self._filter(name, table)
        for result in results.values():
            self._notify(result)
        return results


def length_filter(
    data: Mapping[str, pd.DataFrame],
    mode: Union[str, LengthFilterMode],
    length_set: Optional[Iterable[int]] = None,
    threshold: int = 50,
    as_ranges: bool = False,
    observer: Optional[FilterObserver] = None,
):
    """Filter reads of several samples by length.

    Args:
        data: Mapping of sample name to read table
        mode: "custom" or "periodicity"
        length_set: Read lengths to keep (custom mode only)
        threshold: Minimum percentage of reads in one frame, in [10, 100]
            (periodicity mode only). Default is 50.
        as_ranges: Return a ReadRanges collection per sample
        observer: Optional callback receiving (sample, FilterSummary)

    Returns:
        Mapping of sample name to filtered table (or ReadRanges)

    Example:
        >>> # Keep reads of 27 to 30 nt
        >>> filtered = length_filter(reads, "custom", length_set=range(27, 31))
        >>> # Keep lengths with at least 70% of read ends in one frame
        >>> filtered = length_filter(reads, "periodicity", threshold=70)
    """
    lf = LengthFilter(
        mode,
        length_set=length_set,
        threshold=threshold,
        as_ranges=as_ranges,
        observer=observer,
    )
    return OrderedDict(
        (name, result.table) for name, result in lf.filter_samples(data).items()
    )

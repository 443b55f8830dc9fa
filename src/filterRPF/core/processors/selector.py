"""Row selection by read length."""

from typing import Iterable, Tuple

import pandas as pd

from .types import FilterSummary


def select_lengths(
    table: pd.DataFrame, lengths: Iterable[int]
) -> Tuple[pd.DataFrame, FilterSummary]:
    """Keep the rows whose read length is in ``lengths``.

    Row order and index labels of the input are preserved.

    Args:
        table: Read table with a length column
        lengths: Read lengths to keep

    Returns:
        Tuple of (filtered table, FilterSummary)
    """
    keep = sorted({int(length) for length in lengths})
    filtered = table.loc[table["length"].isin(keep).to_numpy()]
    summary = FilterSummary(reads_before=len(table), reads_after=len(filtered))
    return filtered, summary

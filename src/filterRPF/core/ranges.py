"""Conversion of read tables to interval collections.

Each read becomes an interval spanning its 5' to 3' end on the transcript,
grouped by transcript into one IntervalTree per sequence. Strand is forced
to "+" since coordinates are already transcript-relative.
"""

import logging
from collections import OrderedDict
from typing import Dict, Iterator, Tuple

import pandas as pd
from intervaltree import Interval, IntervalTree

from .errors import LengthFilterError

logger = logging.getLogger(__name__)


class ReadRanges:
    """Reads of one sample as interval trees keyed by transcript.

    Intervals are half-open, so a read covering 1-based positions
    ``end5..end3`` is stored as ``Interval(end5, end3 + 1, data)``.
    """

    def __init__(self, trees: Dict[str, IntervalTree]):
        self.trees = trees

    def __getitem__(self, transcript: str) -> IntervalTree:
        return self.trees[transcript]

    def __contains__(self, transcript: str) -> bool:
        return transcript in self.trees

    def __iter__(self) -> Iterator[str]:
        return iter(self.trees)

    def __len__(self) -> int:
        """Total number of reads across all transcripts."""
        return sum(len(tree) for tree in self.trees.values())

    def transcripts(self):
        return list(self.trees)

    def intervals(self) -> Iterator[Tuple[str, Interval]]:
        """Yield (transcript, interval) pairs sorted by position."""
        for transcript, tree in self.trees.items():
            for iv in sorted(tree, key=lambda iv: (iv.begin, iv.end)):
                yield transcript, iv


def to_ranges(table: pd.DataFrame, sample: str = "reads") -> ReadRanges:
    """Convert a read table into a ReadRanges collection.

    Args:
        table: Read table with transcript, end5 and end3 columns
        sample: Sample name used in error messages

    Returns:
        ReadRanges holding every row; extra columns, the index label and
        the row position are kept on the interval data, with strand set
        to "+"

    Raises:
        LengthFilterError: If any read lacks an end5 or end3 coordinate
    """
    incomplete = table[["end5", "end3"]].isna().any(axis=1)
    if incomplete.any():
        raise LengthFilterError(
            f"Sample '{sample}' has {int(incomplete.sum())} reads without end5/end3 "
            f"coordinates; they cannot be converted to ranges"
        )

    trees: Dict[str, IntervalTree] = OrderedDict()
    extra = [c for c in table.columns if c not in ("transcript", "end5", "end3")]

    records = table.to_dict("records")
    for position, (label, record) in enumerate(zip(table.index, records)):
        begin, end = int(record["end5"]), int(record["end3"])
        data = {c: record[c] for c in extra}
        data["strand"] = "+"
        data["label"] = label
        data["row"] = position
        transcript = str(record["transcript"])
        if transcript not in trees:
            trees[transcript] = IntervalTree()
        trees[transcript].add(Interval(begin, end + 1, data))

    logger.debug(f"Converted {len(table)} reads on {len(trees)} transcripts to ranges")
    return ReadRanges(trees)

"""Reading-frame classification of read ends.

This module assigns each read end to one of the three reading frames relative
to the annotated CDS start and tallies reads per (length, frame). Only reads
whose end falls inside the CDS contribute; the rest are ignored here but are
never removed from the table by this step.
"""

import logging
from typing import Union

import numpy as np
import pandas as pd

from .types import N_FRAMES, FrameCounts, ReadEnd

logger = logging.getLogger(__name__)


def qualifying_mask(table: pd.DataFrame, end: Union[ReadEnd, str]) -> pd.Series:
    """Select reads usable as periodicity evidence for one end.

    A read qualifies when it has an annotated CDS (``start_pos != 0``) and
    the chosen end lies within ``[start_pos, stop_pos]``. Missing lengths or
    coordinates disqualify a read.

    Args:
        table: Read table with start_pos, stop_pos and end columns
        end: Read end to evaluate

    Returns:
        Boolean Series aligned with the table index
    """
    end = ReadEnd(end)
    start = table["start_pos"]
    stop = table["stop_pos"]
    pos = table[end.value]

    present = (
        table["length"].notna() & start.notna() & stop.notna() & pos.notna()
    )
    return present & (start != 0) & ((pos - start) >= 0) & ((stop - pos) >= 0)


def count_frames(table: pd.DataFrame, end: Union[ReadEnd, str]) -> FrameCounts:
    """Count qualifying reads per (length, frame) for one read end.

    Args:
        table: Read table with length, start_pos, stop_pos, end5 and end3
        end: Read end to evaluate

    Returns:
        FrameCounts with one row per length that has qualifying reads

    Example:
        >>> counts = count_frames(reads, ReadEnd.END5)
        >>> counts.lengths, counts.counts[0]
        (array([28, 29]), array([80, 10, 10]))
    """
    end = ReadEnd(end)
    mask = qualifying_mask(table, end)
    subset = table.loc[mask.to_numpy()]
    logger.debug(f"{int(mask.sum())} of {len(table)} reads qualify at {end.value}")

    if subset.empty:
        return FrameCounts.empty(end)

    offsets = subset[end.value].to_numpy(dtype=np.int64) - subset[
        "start_pos"
    ].to_numpy(dtype=np.int64)
    frames = offsets % N_FRAMES
    read_lengths = subset["length"].to_numpy(dtype=np.int64)

    lengths, row = np.unique(read_lengths, return_inverse=True)
    counts = np.zeros((len(lengths), N_FRAMES), dtype=np.int64)
    np.add.at(counts, (row, frames), 1)

    return FrameCounts(end=end, lengths=lengths, counts=counts)

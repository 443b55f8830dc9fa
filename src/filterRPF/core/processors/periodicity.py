"""Periodicity evaluation for read lengths.

Because ribosomes step three nucleotides per elongation cycle, the ends of
genuine ribosome footprints pile up in one of the three codon positions.
A read length is considered periodic at an end when any single frame holds
at least ``threshold`` percent of that length's qualifying reads.
"""

import logging
from typing import Set

import numpy as np
import pandas as pd

from .frames import count_frames
from .types import FrameCounts, PeriodicityResult, ReadEnd

logger = logging.getLogger(__name__)


def accepted_lengths(counts: FrameCounts, threshold: float) -> Set[int]:
    """Return the read lengths with a frame at or above the threshold.

    Args:
        counts: Per (length, frame) counts for one end
        threshold: Minimum percentage of reads in one frame

    Returns:
        Set of accepted read lengths
    """
    if counts.lengths.size == 0:
        return set()

    totals = counts.totals()
    percent = counts.percentages()
    passing = (totals > 0) & (percent >= threshold).any(axis=1)
    return {int(length) for length in counts.lengths[passing]}


def evaluate_periodicity(table: pd.DataFrame, threshold: float) -> PeriodicityResult:
    """Evaluate both read ends and collect their accepted lengths.

    Args:
        table: Read table for a single sample
        threshold: Minimum percentage of reads in one frame

    Returns:
        PeriodicityResult whose ``selected`` set holds lengths periodic at
        both ends
    """
    end5 = count_frames(table, ReadEnd.END5)
    end3 = count_frames(table, ReadEnd.END3)
    accepted5 = accepted_lengths(end5, threshold)
    accepted3 = accepted_lengths(end3, threshold)

    logger.debug(
        f"Periodic lengths at threshold {threshold}: "
        f"5' {sorted(accepted5)}, 3' {sorted(accepted3)}"
    )

    return PeriodicityResult(
        threshold=threshold,
        end5=end5,
        end3=end3,
        accepted_end5=accepted5,
        accepted_end3=accepted3,
    )


def periodicity_table(result: PeriodicityResult) -> pd.DataFrame:
    """Combine both ends' frame tables into one long table.

    Columns are end, length, frame, count, percent and accepted.
    """
    parts = []
    for counts, accepted in (
        (result.end5, result.accepted_end5),
        (result.end3, result.accepted_end3),
    ):
        part = counts.to_frame()
        part.insert(0, "end", counts.end.value)
        part["accepted"] = part["length"].isin(accepted)
        parts.append(part)

    table = pd.concat(parts, ignore_index=True)
    if table.empty:
        return table
    table["percent"] = np.round(table["percent"].astype(float), 2)
    return table

"""Shared types and dataclasses for length filtering."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Set, Union

import numpy as np
import pandas as pd

N_FRAMES = 3


class LengthFilterMode(str, Enum):
    """How read lengths to keep are chosen.

    Attributes:
        CUSTOM: Keep the lengths supplied by the user
        PERIODICITY: Keep the lengths whose 5' and 3' ends both show
            trinucleotide periodicity along the CDS

    Example:
        >>> LengthFilterMode("custom") is LengthFilterMode.CUSTOM
        True
    """

    CUSTOM = "custom"
    PERIODICITY = "periodicity"


class ReadEnd(str, Enum):
    """Read extremity evaluated for periodicity; values are column names."""

    END5 = "end5"
    END3 = "end3"


@dataclass
class FrameCounts:
    """Read counts per (length, frame) for one read end.

    Attributes:
        end: Read end the counts were computed from
        lengths: Sorted distinct read lengths with at least one qualifying read
        counts: Integer matrix of shape (len(lengths), 3); column i holds the
            reads whose end falls in frame i relative to the CDS start
    """

    end: ReadEnd
    lengths: np.ndarray
    counts: np.ndarray

    @classmethod
    def empty(cls, end: ReadEnd) -> "FrameCounts":
        return cls(
            end=end,
            lengths=np.zeros(0, dtype=np.int64),
            counts=np.zeros((0, N_FRAMES), dtype=np.int64),
        )

    def totals(self) -> np.ndarray:
        """Qualifying reads per length, summed over frames."""
        return self.counts.sum(axis=1)

    def percentages(self) -> np.ndarray:
        """Percentage of each length's reads falling in each frame.

        Rows whose total is zero are returned as zeros rather than NaN.
        """
        totals = self.totals()
        percent = np.zeros(self.counts.shape, dtype=float)
        nonzero = totals > 0
        percent[nonzero] = 100.0 * self.counts[nonzero] / totals[nonzero, None]
        return percent

    def to_frame(self) -> pd.DataFrame:
        """Long-format table with one row per observed (length, frame)."""
        percent = self.percentages()
        rows = []
        for i, length in enumerate(self.lengths):
            for frame in range(N_FRAMES):
                if self.counts[i, frame] == 0:
                    continue
                rows.append(
                    {
                        "length": int(length),
                        "frame": frame,
                        "count": int(self.counts[i, frame]),
                        "percent": float(percent[i, frame]),
                    }
                )
        return pd.DataFrame(rows, columns=["length", "frame", "count", "percent"])


@dataclass
class PeriodicityResult:
    """Outcome of evaluating periodicity at both read ends."""

    threshold: float
    end5: FrameCounts
    end3: FrameCounts
    accepted_end5: Set[int]
    accepted_end3: Set[int]

    @property
    def selected(self) -> Set[int]:
        """Lengths periodic at both the 5' and 3' end."""
        return self.accepted_end5 & self.accepted_end3


@dataclass
class FilterSummary:
    """Read counts before and after filtering one sample."""

    reads_before: int
    reads_after: int

    @property
    def reads_removed(self) -> int:
        return self.reads_before - self.reads_after

    @property
    def percent_removed(self) -> float:
        if self.reads_before == 0:
            return 0.0
        return 100.0 * self.reads_removed / self.reads_before

    def as_dict(self) -> Dict[str, Any]:
        return {
            "reads_before": self.reads_before,
            "reads_after": self.reads_after,
            "reads_removed": self.reads_removed,
            "percent_removed": self.percent_removed,
        }


@dataclass
class SampleFilterResult:
    """Results from filtering a single sample.

    Attributes:
        sample: Sample name
        table: Filtered read table, or a ReadRanges collection when the
            filter was asked to return ranges
        summary: Read counts before and after filtering
        lengths: Read lengths that were kept
        periodicity: Per-end frame counts and accepted lengths
            (periodicity mode only)
    """

    sample: str
    table: Union[pd.DataFrame, Any]
    summary: FilterSummary
    lengths: Set[int] = field(default_factory=set)
    periodicity: Optional[PeriodicityResult] = None

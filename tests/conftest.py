"""Shared fixtures for filterRPF tests."""

import pandas as pd
import pytest

CDS_START = 101
CDS_STOP = 700


def build_reads(length, end5_frames, end3_frames, transcript="tx1", strand="+"):
    """Build reads of one length with chosen 5' and 3' frame counts.

    end5_frames and end3_frames give the number of reads whose 5' (resp. 3')
    end falls in frames 0, 1 and 2; both must sum to the same total.
    """
    frames5 = [f for f, n in enumerate(end5_frames) for _ in range(n)]
    frames3 = [f for f, n in enumerate(end3_frames) for _ in range(n)]
    assert len(frames5) == len(frames3)

    rows = []
    for i, (f5, f3) in enumerate(zip(frames5, frames3)):
        codon = CDS_START + 3 * (i % 150)
        rows.append(
            {
                "transcript": transcript,
                "end5": codon + f5,
                "end3": codon + 3 * (length // 3) + f3,
                "length": length,
                "start_pos": CDS_START,
                "stop_pos": CDS_STOP,
                "strand": strand,
            }
        )
    return pd.DataFrame(rows)


@pytest.fixture
def make_reads():
    """Factory building reads with controlled frame distributions."""
    return build_reads


@pytest.fixture
def periodic_reads():
    """Reads of lengths 28-30 with known frame percentages.

    5' ends: 28 -> 80/10/10, 29 -> 40/30/30, 30 -> 75/15/10
    3' ends: 28 -> 72/14/14, 29 -> 50/25/25, 30 -> 60/20/20
    """
    table = pd.concat(
        [
            build_reads(28, (80, 10, 10), (72, 14, 14)),
            build_reads(29, (40, 30, 30), (50, 25, 25), transcript="tx2"),
            build_reads(30, (75, 15, 10), (60, 20, 20)),
        ],
        ignore_index=True,
    )
    # interleave lengths so order preservation is meaningful
    return table.sample(frac=1, random_state=7).reset_index(drop=True)


@pytest.fixture
def mixed_length_reads():
    """Reads of lengths 25 to 35 in a fixed interleaved order."""
    lengths = [25, 31, 27, 35, 28, 26, 30, 29, 33, 27, 34, 32, 30, 28, 25, 29]
    return pd.DataFrame(
        {
            "transcript": [f"tx{i % 3}" for i in range(len(lengths))],
            "end5": [200 + i for i in range(len(lengths))],
            "end3": [200 + i + n - 1 for i, n in enumerate(lengths)],
            "length": lengths,
            "start_pos": [0 if i % 4 == 0 else 150 for i in range(len(lengths))],
            "stop_pos": [0 if i % 4 == 0 else 600 for i in range(len(lengths))],
            "strand": ["+"] * len(lengths),
        }
    )

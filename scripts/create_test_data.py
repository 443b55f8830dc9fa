"""Create test datasets for filterRPF testing.

This script generates read tables with different periodicity
characteristics to test filterRPF functionality.
"""

import random
from pathlib import Path
from typing import Dict, List, Tuple

import pandas as pd

COLUMNS = ["transcript", "end5", "end3", "length", "start_pos", "stop_pos", "strand"]


def ensure_output_dir(base_dir: str = "test_data") -> Path:
    """Create and return output directory."""
    out_dir = Path(base_dir)
    out_dir.mkdir(exist_ok=True)
    return out_dir


def create_transcripts(n: int = 50) -> List[Tuple[str, int, int]]:
    """Create (name, cds_start, cds_stop) tuples; every fifth one is non-coding."""
    transcripts = []
    for i in range(n):
        if i % 5 == 0:
            transcripts.append((f"ncRNA_{i}", 0, 0))
            continue
        start = random.randint(50, 200)
        codons = random.randint(100, 600)
        transcripts.append((f"tx_{i}", start, start + 3 * codons - 1))
    return transcripts


def create_read(
    transcript: Tuple[str, int, int], length: int, frame_weights: Tuple[float, ...]
) -> Dict:
    """Create a single read whose 5' end frame follows frame_weights."""
    name, start, stop = transcript
    if start == 0:
        end5 = random.randint(1, 1000)
    else:
        codon = random.randint(0, (stop - start - length) // 3)
        frame = random.choices([0, 1, 2], weights=frame_weights)[0]
        end5 = start + 3 * codon + frame
    return {
        "transcript": name,
        "end5": end5,
        "end3": end5 + length - 1,
        "length": length,
        "start_pos": start,
        "stop_pos": stop,
        "strand": "+",
    }


def create_sample(
    transcripts: List[Tuple[str, int, int]],
    length_profiles: Dict[int, Tuple[int, Tuple[float, ...]]],
) -> pd.DataFrame:
    """Create one sample from {length: (n_reads, frame_weights)}."""
    reads = []
    for length, (n_reads, weights) in length_profiles.items():
        for _ in range(n_reads):
            reads.append(create_read(random.choice(transcripts), length, weights))
    random.shuffle(reads)
    return pd.DataFrame(reads, columns=COLUMNS)


def create_good_rpf_dataset(output_dir: Path, transcripts) -> None:
    """Create sample where 28-30 nt reads are strongly periodic."""
    profiles = {
        25: (300, (1, 1, 1)),
        28: (2000, (8, 1, 1)),
        29: (3000, (7, 2, 1)),
        30: (1500, (1, 7, 2)),
        34: (400, (1, 1, 1)),
    }
    create_sample(transcripts, profiles).to_csv(
        output_dir / "good_rpf.tsv", sep="\t", index=False
    )


def create_weak_periodicity_dataset(output_dir: Path, transcripts) -> None:
    """Create compressed sample where only 29 nt reads are periodic."""
    profiles = {
        27: (1000, (4, 3, 3)),
        28: (1000, (5, 3, 2)),
        29: (2000, (7, 2, 1)),
        31: (1000, (1, 1, 1)),
    }
    create_sample(transcripts, profiles).to_csv(
        output_dir / "weak_periodicity.tsv.gz", sep="\t", index=False, compression="gzip"
    )


def main():
    """Generate all test datasets."""
    random.seed(42)
    out_dir = ensure_output_dir()
    transcripts = create_transcripts()

    create_good_rpf_dataset(out_dir, transcripts)
    create_weak_periodicity_dataset(out_dir, transcripts)

    print(f"Created test datasets in {out_dir}")
    print("\nTest commands:")
    print("\n1. Keep 28-30 nt reads:")
    print(
        "filterRPF length-filter test_data/good_rpf.tsv \
            --mode custom --lengths 28:30 --output filtered/"
    )

    print("\n2. Keep periodic read lengths:")
    print(
        "filterRPF length-filter test_data/good_rpf.tsv \
            test_data/weak_periodicity.tsv.gz --mode periodicity \
            --threshold 60 --periodicity-report --output filtered/"
    )


if __name__ == "__main__":
    main()

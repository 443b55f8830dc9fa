"""File handling utilities for filterRPF.

This module provides utilities for:
    - File validation and checking
    - Reading and writing tab-separated read tables
    - Writing read intervals as BED
"""

import bz2
import gzip
import logging
import os
from pathlib import Path
from typing import Union

import pandas as pd

logger = logging.getLogger(__name__)

TABLE_SUFFIXES = (".tsv", ".txt", ".tab")
COMPRESSED_SUFFIXES = (".gz", ".bz2")


def check_file_readability(file_path: Union[str, Path]) -> bool:
    """Check if a file exists and is readable.

    Args:
        file_path: Path to file to check

    Returns:
        bool: True if file is readable

    Raises:
        FileNotFoundError: If file doesn't exist
        PermissionError: If file cannot be read
        TypeError: If file_path is not str or Path

    Examples:
        >>> check_file_readability('existing_file.tsv')
        True
        >>> check_file_readability('nonexistent.tsv')
        Raises FileNotFoundError
    """
    if isinstance(file_path, str):
        file_path = Path(file_path)
    elif not isinstance(file_path, Path):
        raise TypeError(f"file_path must be str or Path, not {type(file_path)}")

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if not os.access(file_path, os.R_OK):
        raise PermissionError(f"Cannot read file: {file_path}")
    return True


def get_file_opener(filepath: Path):
    """Determine the appropriate file opener based on file extension."""
    suffix = filepath.suffix.lower()
    if suffix == ".gz":
        return gzip.open
    elif suffix == ".bz2":
        return bz2.open
    return open


def sample_name(filepath: Path) -> str:
    """Derive a sample name from a read table path.

    Examples:
        >>> sample_name(Path("data/WT_rep1.tsv.gz"))
        'WT_rep1'
    """
    name = filepath.name
    for suffixes in (COMPRESSED_SUFFIXES, TABLE_SUFFIXES):
        for suffix in suffixes:
            if name.lower().endswith(suffix):
                name = name[: -len(suffix)]
                break
    return name


def read_table(filepath: Path) -> pd.DataFrame:
    """Read a tab-separated read table with a header line.

    Args:
        filepath: Path to a plain, gzipped or bzip2 compressed table

    Returns:
        DataFrame with one row per read
    """
    check_file_readability(filepath)
    opener = get_file_opener(filepath)
    with opener(filepath, "rt") as f:
        table = pd.read_csv(f, sep="\t")
    logger.info(f"Read {len(table)} reads from {filepath}")
    return table


def write_table(table: pd.DataFrame, filepath: Path) -> None:
    """Write a read table as tab-separated text without the index."""
    opener = get_file_opener(filepath)
    with opener(filepath, "wt") as f:
        table.to_csv(f, sep="\t", index=False)


def write_ranges_bed(ranges, filepath: Path) -> None:
    """Write a ReadRanges collection as BED6.

    Intervals hold 1-based inclusive read coordinates, stored half-open, so
    the BED start is ``begin - 1`` and the BED end is ``end - 1``.
    """
    opener = get_file_opener(filepath)
    with opener(filepath, "wt") as f:
        for transcript, iv in ranges.intervals():
            name = iv.data.get("name", ".")
            f.write(f"{transcript}\t{iv.begin - 1}\t{iv.end - 1}\t{name}\t0\t+\n")

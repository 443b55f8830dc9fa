"""Validation utilities for filterRPF.

This module provides validation functions for the length filter inputs:
    - Filter mode
    - Custom read length sets and their string form
    - Periodicity threshold
    - Read table columns
"""

import numbers
import re
from typing import Iterable, List, Set, Union

import numpy as np
import pandas as pd

from ..core.errors import (
    InvalidLengthSet,
    InvalidMode,
    InvalidThreshold,
    MissingColumnsError,
)
from ..core.processors.types import LengthFilterMode

MIN_THRESHOLD = 10
MAX_THRESHOLD = 100

CUSTOM_COLUMNS: Set[str] = {"length"}
PERIODICITY_COLUMNS: Set[str] = {"length", "start_pos", "stop_pos", "end5", "end3"}
RANGE_COLUMNS: Set[str] = {"transcript", "end5", "end3"}


def _is_integral(value) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, numbers.Real):
        return float(value).is_integer()
    return False


def validate_mode(mode: Union[str, LengthFilterMode]) -> LengthFilterMode:
    """Validate the filter mode.

    Args:
        mode: "custom" or "periodicity"

    Returns:
        LengthFilterMode: The matching enum member

    Raises:
        InvalidMode: If mode is not supported

    Examples:
        >>> validate_mode('periodicity')
        <LengthFilterMode.PERIODICITY: 'periodicity'>
    """
    try:
        return LengthFilterMode(mode)
    except ValueError:
        valid = [m.value for m in LengthFilterMode]
        raise InvalidMode(f"Unsupported length filter mode: {mode!r}. Must be one of {valid}")


def validate_length_set(length_set) -> Set[int]:
    """Validate a custom set of read lengths.

    A single integer is treated as a one-element set.

    Args:
        length_set: Integer or collection of integers

    Returns:
        Set[int]: The lengths to keep

    Raises:
        InvalidLengthSet: If the set is empty or holds non-integers

    Examples:
        >>> sorted(validate_length_set(range(27, 31)))
        [27, 28, 29, 30]
        >>> validate_length_set([])
        Raises InvalidLengthSet
    """
    if length_set is None:
        raise InvalidLengthSet("A length set is required in custom mode")
    if isinstance(length_set, (str, bytes)):
        raise InvalidLengthSet(
            f"Length set must contain integers, got string {length_set!r}"
        )
    if _is_integral(length_set):
        return {int(length_set)}

    try:
        values = list(length_set)
    except TypeError:
        raise InvalidLengthSet(
            f"Length set must be an integer or a collection of integers, "
            f"not {type(length_set).__name__}"
        )

    if not values:
        raise InvalidLengthSet("Length set cannot be empty")
    bad = [v for v in values if not _is_integral(v)]
    if bad:
        raise InvalidLengthSet(f"Length set must contain only integers, got {bad[:5]}")
    return {int(v) for v in values}


def validate_threshold(threshold) -> int:
    """Validate the periodicity threshold.

    Args:
        threshold: Percentage of reads required in a single frame

    Returns:
        int: The threshold

    Raises:
        InvalidThreshold: If not an integer between 10 and 100

    Examples:
        >>> validate_threshold(70)
        70
        >>> validate_threshold(5)
        Raises InvalidThreshold
    """
    if not _is_integral(threshold) or not (
        MIN_THRESHOLD <= threshold <= MAX_THRESHOLD
    ):
        raise InvalidThreshold(
            f"Periodicity threshold must be an integer between "
            f"{MIN_THRESHOLD} and {MAX_THRESHOLD}, got {threshold!r}"
        )
    return int(threshold)


def validate_read_table(
    sample: str,
    table: pd.DataFrame,
    mode: Union[str, LengthFilterMode],
    as_ranges: bool = False,
) -> bool:
    """Check that a read table has the columns the filter mode needs.

    Conversion to ranges additionally needs transcript, end5 and end3.

    Raises:
        MissingColumnsError: If any required column is absent
    """
    mode = validate_mode(mode)
    required = PERIODICITY_COLUMNS if mode is LengthFilterMode.PERIODICITY else CUSTOM_COLUMNS
    if as_ranges:
        required = required | RANGE_COLUMNS
    missing = required - set(table.columns)
    if missing:
        raise MissingColumnsError(sample, missing)
    return True


_RANGE = re.compile(r"^\s*(\d+)\s*[:-]\s*(\d+)\s*$")


def parse_length_spec(spec: Union[str, int, Iterable]) -> List[int]:
    """Parse a read length specification into a sorted list of lengths.

    Strings may combine single lengths and inclusive ranges separated by
    commas, with ranges written as ``27:30`` or ``27-30``. Non-string input
    is passed to validate_length_set unchanged.

    Raises:
        InvalidLengthSet: If the specification cannot be parsed

    Examples:
        >>> parse_length_spec("25,27:30")
        [25, 27, 28, 29, 30]
    """
    if not isinstance(spec, str):
        return sorted(validate_length_set(spec))

    lengths: Set[int] = set()
    for token in spec.split(","):
        token = token.strip()
        if not token:
            continue
        match = _RANGE.match(token)
        if match:
            low, high = int(match.group(1)), int(match.group(2))
            if low > high:
                raise InvalidLengthSet(f"Invalid length range: {token}")
            lengths.update(range(low, high + 1))
        elif token.isdigit():
            lengths.add(int(token))
        else:
            raise InvalidLengthSet(f"Invalid length specification: {token!r}")

    if not lengths:
        raise InvalidLengthSet("Length set cannot be empty")
    return sorted(lengths)

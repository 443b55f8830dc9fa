"""Test suite for parameter validation."""

import numpy as np
import pandas as pd
import pytest
from filterRPF.core.errors import (
    InvalidLengthSet,
    InvalidMode,
    InvalidThreshold,
    MissingColumnsError,
)
from filterRPF.core.processors.types import LengthFilterMode
from filterRPF.utils.validation import (
    parse_length_spec,
    validate_length_set,
    validate_mode,
    validate_read_table,
    validate_threshold,
)


def test_validate_mode():
    assert validate_mode("custom") is LengthFilterMode.CUSTOM
    assert validate_mode(LengthFilterMode.PERIODICITY) is LengthFilterMode.PERIODICITY
    with pytest.raises(InvalidMode, match="custom"):
        validate_mode("both")


@pytest.mark.parametrize(
    "length_set, expected",
    [
        (28, {28}),
        ([27, 28, 30], {27, 28, 30}),
        (range(27, 31), {27, 28, 29, 30}),
        ((29.0, 30), {29, 30}),
        (np.array([31, 32]), {31, 32}),
        ({26}, {26}),
    ],
)
def test_validate_length_set(length_set, expected):
    assert validate_length_set(length_set) == expected


@pytest.mark.parametrize("length_set", [None, [], "28", 28.5, [28, "29"], [False], object()])
def test_validate_length_set_rejects(length_set):
    with pytest.raises(InvalidLengthSet):
        validate_length_set(length_set)


@pytest.mark.parametrize("threshold", [10, 50, 100, 70.0, np.int64(33)])
def test_validate_threshold(threshold):
    assert validate_threshold(threshold) == int(threshold)


@pytest.mark.parametrize("threshold", [9, 101, 0, -50, 49.9, None, "70", False])
def test_validate_threshold_rejects(threshold):
    with pytest.raises(InvalidThreshold, match="between 10 and 100"):
        validate_threshold(threshold)


def test_validate_read_table_columns():
    table = pd.DataFrame({"length": [28], "end5": [1], "end3": [28]})
    assert validate_read_table("s1", table, "custom")
    with pytest.raises(MissingColumnsError) as excinfo:
        validate_read_table("s1", table, "periodicity")
    assert excinfo.value.missing == ["start_pos", "stop_pos"]
    assert excinfo.value.sample == "s1"


def test_validate_read_table_for_ranges():
    table = pd.DataFrame({"length": [28]})
    with pytest.raises(MissingColumnsError) as excinfo:
        validate_read_table("s1", table, "custom", as_ranges=True)
    assert excinfo.value.missing == ["end3", "end5", "transcript"]


@pytest.mark.parametrize(
    "spec, expected",
    [
        ("28", [28]),
        ("27:30", [27, 28, 29, 30]),
        ("27-30", [27, 28, 29, 30]),
        ("25, 27:29,33", [25, 27, 28, 29, 33]),
        ("30,28,28", [28, 30]),
        ([30, 29], [29, 30]),
    ],
)
def test_parse_length_spec(spec, expected):
    assert parse_length_spec(spec) == expected


@pytest.mark.parametrize("spec", ["", "30:27", "abc", "27:", "1.5"])
def test_parse_length_spec_rejects(spec):
    with pytest.raises(InvalidLengthSet):
        parse_length_spec(spec)

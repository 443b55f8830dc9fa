"""Utility functions and helpers for filterRPF.

This module provides common utilities used across the filterRPF package:
    - File handling and validation
    - Parameter validation
    - Logging configuration
"""

from .file_utils import check_file_readability, read_table, write_table
from .logging import setup_logging
from .validation import (
    parse_length_spec,
    validate_length_set,
    validate_mode,
    validate_threshold,
)

__all__ = [
    "check_file_readability",
    "read_table",
    "write_table",
    "setup_logging",
    "parse_length_spec",
    "validate_length_set",
    "validate_mode",
    "validate_threshold",
]

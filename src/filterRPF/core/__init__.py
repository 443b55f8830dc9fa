"""Core functionality for filterRPF."""

from .errors import (
    InvalidLengthSet,
    InvalidMode,
    InvalidThreshold,
    LengthFilterError,
    MissingColumnsError,
)
from .processors.types import (
    FilterSummary,
    FrameCounts,
    LengthFilterMode,
    PeriodicityResult,
    ReadEnd,
    SampleFilterResult,
)

__all__ = [
    "LengthFilterError",
    "InvalidMode",
    "InvalidLengthSet",
    "InvalidThreshold",
    "MissingColumnsError",
    "LengthFilterMode",
    "ReadEnd",
    "FrameCounts",
    "FilterSummary",
    "PeriodicityResult",
    "SampleFilterResult",
]

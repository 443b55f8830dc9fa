"""Exceptions raised by the length filter."""

from typing import Iterable


class LengthFilterError(ValueError):
    """Base class for length filter parameter and schema errors."""


class InvalidMode(LengthFilterError):
    """Raised when the filter mode is not "custom" or "periodicity"."""


class InvalidLengthSet(LengthFilterError):
    """Raised when the custom length set is empty or not made of integers."""


class InvalidThreshold(LengthFilterError):
    """Raised when the periodicity threshold is not an integer in [10, 100]."""


class MissingColumnsError(LengthFilterError):
    """Raised when a read table lacks columns required by the filter mode."""

    def __init__(self, sample: str, missing: Iterable[str]):
        self.sample = sample
        self.missing = sorted(missing)
        super().__init__(
            f"Sample '{sample}' is missing required columns: "
            f"{', '.join(self.missing)}"
        )

"""Configuration loading for the length filter.

Parameters can be stored in a YAML file, for example::

    mode: periodicity
    threshold: 70
    periodicity_report: true

or::

    mode: custom
    length_set: "27:30"
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..utils.validation import parse_length_spec

logger = logging.getLogger(__name__)


@dataclass
class FilterConfig:
    """Parameters of a length filter run.

    Attributes:
        mode: "custom" or "periodicity"
        length_set: Read lengths to keep (custom mode)
        threshold: Minimum percentage of reads in one frame (periodicity mode)
        as_ranges: Write reads as BED intervals instead of tables
        periodicity_report: Write per-sample frame tables (periodicity mode)
    """

    mode: Optional[str] = None
    length_set: Optional[List[int]] = None
    threshold: int = 50
    as_ranges: bool = False
    periodicity_report: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FilterConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown configuration keys: {sorted(unknown)}. "
                f"Must be among {sorted(known)}"
            )
        values = dict(data)
        if values.get("length_set") is not None:
            values["length_set"] = parse_length_spec(values["length_set"])
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Path) -> "FilterConfig":
        """Load a config from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        if data is None:
            logger.warning(f"Empty configuration file: {path}")
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration in {path} must be a mapping")
        logger.info(f"Loaded configuration from {path}")
        return cls.from_dict(data)

    def merge(self, **overrides: Any) -> "FilterConfig":
        """Return a copy with every override that is not None applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if changes.get("length_set") is not None:
            changes["length_set"] = parse_length_spec(changes["length_set"])
        return replace(self, **changes)

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

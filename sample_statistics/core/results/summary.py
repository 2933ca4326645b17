"""
Summary report for a sample.

A Summary is an ordered collection of statistic labels and their formatted
values, rendered as an aligned two-column text block. Once frozen, a Summary
no longer accepts statistics.
"""

import json
from types import MappingProxyType
from typing import Any, Dict, Mapping

from ..errors import SummaryFrozenError

UNKNOWN = "Unknown"


class Summary:
    """
    Formatted statistics of one sample.

    Attributes:
        name: Name of the sample the statistics describe
        unit: Unit appended to unit-bearing values ("" for none)
        statistics: Read-only view of label -> formatted value, in insertion order
    """

    def __init__(self, name: str, unit: str = ""):
        self._name = name
        self._unit = unit or ""
        self._statistics: Dict[str, str] = {}
        self._label_width = 0
        self._value_width = 0
        self._frozen = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def statistics(self) -> Mapping[str, str]:
        return MappingProxyType(self._statistics)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def label_width(self) -> int:
        """Length of the longest label added so far."""
        return self._label_width

    @property
    def value_width(self) -> int:
        """Length of the longest value (with unit) added so far."""
        return self._value_width

    def add_statistic(self, label: str, value: str, with_unit: bool = True) -> None:
        """
        Add a statistic and its formatted value.

        The first value stored under a label wins; later calls with the same
        label do not replace it, but still count towards the column widths.

        Args:
            label: Statistic label (e.g. "Mean")
            value: Already formatted value
            with_unit: Append the summary's unit to the value

        Raises:
            SummaryFrozenError: If the summary has been frozen
        """
        if self._frozen:
            raise SummaryFrozenError(f"Summary for sample {self.name!r} is frozen")

        if with_unit and self.unit:
            value = f"{value} {self.unit}"
        self._label_width = max(self._label_width, len(label))
        self._value_width = max(self._value_width, len(value))
        self._statistics.setdefault(label, value)

    def get_statistic(self, label: str) -> str:
        """Return the formatted value of a statistic, or "Unknown"."""
        return self._statistics.get(label, UNKNOWN)

    def freeze(self) -> 'Summary':
        """Stop accepting statistics. Returns self."""
        self._frozen = True
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Serialize summary to dictionary."""
        return {
            "name": self.name,
            "unit": self.unit,
            "statistics": dict(self._statistics),
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize summary to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def __contains__(self, label: object) -> bool:
        return label in self._statistics

    def __len__(self) -> int:
        return len(self._statistics)

    def __str__(self) -> str:
        label_width = self._label_width
        value_width = self._value_width

        lines = [f"Summary Statistics for Sample: {self.name}", ""]
        for label, value in self._statistics.items():
            lines.append(f"{label:<{label_width}}: {value:>{value_width}}")

        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Summary({self.name!r}, unit={self.unit!r}, statistics={len(self)})"

"""
Sample class: an immutable set of observations and its descriptive statistics.

Statistics:
- Count, Sum, Mean
- Variance: population variance (divided by N, no degree-of-freedom correction)
- Std Dev: square root of the population variance

The minimum sample size (threshold, at least 30) is what makes the lack of a
degree-of-freedom correction acceptable.
"""

import math
import threading
from typing import Any, Dict, Iterable, Iterator, Optional

import numpy as np

from ..errors import InvalidArgumentError
from ..results.summary import Summary
from .options import SampleSettings, get_settings


def _is_empty(text: Optional[str]) -> bool:
    return text is None or text == ""


class Sample:
    """
    Immutable collection of observations with lazily computed statistics.

    Samples are normally produced by ObservationAccumulator.build(), which
    rejects non-finite values; constructing one directly trusts the caller
    to pass finite values.

    Attributes:
        name: Sample name (defaults to the object's identity representation)
        unit: Unit of measurement for every observation ("" for none)
        values: Read-only float64 array of the observations in insertion order
    """

    def __init__(
        self,
        values: Iterable[float],
        name: Optional[str] = None,
        unit: Optional[str] = None,
        *,
        settings: Optional[SampleSettings] = None,
    ):
        """
        Create a sample from a sequence of observations.

        Args:
            values: Observations; copied into an internal read-only array
            name: Name of the sample
            unit: Unit of measurement for all observations
            settings: Settings for this sample (default: process-wide settings)

        Raises:
            InvalidArgumentError: If values is None, not numeric, not one-dimensional, or
                holds fewer observations than the threshold
        """
        if values is None:
            raise InvalidArgumentError("Empty value array")
        if not isinstance(values, (np.ndarray, list, tuple)):
            values = list(values)

        try:
            raw = np.asarray(values)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Observations must be numbers: {e}") from None
        if raw.dtype.kind not in "iuf":
            raise InvalidArgumentError(
                f"Observations must be numbers, got array of dtype {raw.dtype}"
            )

        array = np.array(raw, dtype=np.float64)
        if array.ndim != 1:
            raise InvalidArgumentError(
                f"Observations must be one-dimensional, got shape {array.shape}"
            )

        threshold = (settings or get_settings()).threshold
        if array.size < threshold:
            raise InvalidArgumentError(
                f"The sample size is less than the threshold: {array.size} < {threshold}"
            )

        self._setup(array, name, unit, settings)

    @classmethod
    def _from_validated(
        cls,
        array: np.ndarray,
        name: Optional[str],
        unit: Optional[str],
        settings: Optional[SampleSettings],
    ) -> 'Sample':
        """Create a sample from an array whose size was already checked."""
        sample = cls.__new__(cls)
        sample._setup(array, name, unit, settings)
        return sample

    def _setup(
        self,
        array: np.ndarray,
        name: Optional[str],
        unit: Optional[str],
        settings: Optional[SampleSettings],
    ) -> None:
        array.setflags(write=False)
        self._values = array
        self._name = object.__repr__(self) if _is_empty(name) else name
        self._unit = "" if _is_empty(unit) else unit
        self._settings = settings

        self._lock = threading.RLock()
        self._sum: Optional[float] = None
        self._squared_deviations: Optional[float] = None
        self._summary: Optional[Summary] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def unit(self) -> str:
        return self._unit

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the observations."""
        return self._values

    @property
    def settings(self) -> SampleSettings:
        """Settings in effect for this sample right now."""
        return self._settings or get_settings()

    @property
    def count(self) -> int:
        """Number of observations in the sample."""
        return int(self._values.size)

    @property
    def sum(self) -> float:
        """
        Sum of all observations.

        Accumulated left to right in insertion order, so rounding matches a
        plain running total over the same sequence.
        """
        if self._sum is None:
            with self._lock:
                if self._sum is None:
                    self._sum = float(np.cumsum(self._values)[-1])
        return self._sum

    @property
    def mean(self) -> float:
        """Arithmetic mean of the observations."""
        return self.sum / self.count

    @property
    def variance(self) -> float:
        """
        Population variance of the observations.

        var = sum((x_i - mean)^2) / N

        No adjustment is made for the lost degree of freedom; with at least
        MINIMUM_THRESHOLD observations the difference is negligible.
        """
        if self._squared_deviations is None:
            with self._lock:
                if self._squared_deviations is None:
                    deviations = self._values - self.mean
                    self._squared_deviations = float(np.cumsum(deviations ** 2)[-1])
        return self._squared_deviations / self.count

    @property
    def std_dev(self) -> float:
        """Population standard deviation, sqrt(variance)."""
        return math.sqrt(self.variance)

    @property
    def summary(self) -> Summary:
        """
        Summary statistics of the sample.

        Built on first access using the precision in effect at that moment,
        then reused unchanged.
        """
        if self._summary is None:
            with self._lock:
                if self._summary is None:
                    self._summary = self._build_summary()
        return self._summary

    def _build_summary(self) -> Summary:
        settings = self.settings
        summary = Summary(name=self._name, unit=self._unit)
        summary.add_statistic("Count", str(self.count), with_unit=False)
        summary.add_statistic("Sum", settings.format_value(self.sum))
        summary.add_statistic("Mean", settings.format_value(self.mean))
        summary.add_statistic("Variance", settings.format_value(self.variance))
        summary.add_statistic("Std Dev", settings.format_value(self.std_dev))
        return summary.freeze()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize sample statistics to dictionary (raw numbers, no formatting)."""
        return {
            "name": self._name,
            "unit": self._unit,
            "count": self.count,
            "sum": self.sum,
            "mean": self.mean,
            "variance": self.variance,
            "std_dev": self.std_dev,
        }

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._values)

    def __str__(self) -> str:
        unit_suffix = f" {self._unit}" if self._unit else ""
        lines = [f"{float(v)!r}{unit_suffix}\n" for v in self._values]
        return "".join(lines) + "\n" + str(self.summary)

    def __repr__(self) -> str:
        return f"Sample({self._name!r}, n={self.count}, unit={self._unit!r})"

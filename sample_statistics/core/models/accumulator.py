"""
ObservationAccumulator: incremental construction of a Sample.

Observations are added one at a time or in batches. Once enough observations
are collected (see options.get_threshold) a Sample can be built.

Building does not consume the observations. More can be added afterwards and
the next Sample will contain all of them, old and new; use set_name() to tell
successive samples apart, or reset() to start over.
"""

import logging
import math
from typing import Iterable, List, Optional, Tuple

import numpy as np

from ..errors import InsufficientSampleSizeError, InvalidArgumentError, InvalidObservationError
from .options import SampleSettings, get_settings
from .sample import Sample

logger = logging.getLogger(__name__)


class ObservationAccumulator:
    """
    Mutable collector of observations that builds immutable Samples.

    Attributes:
        name: Name given to the next Sample built
        unit: Unit of measurement given to the next Sample built
        count: Number of observations collected so far
    """

    def __init__(
        self,
        name: Optional[str] = None,
        unit: Optional[str] = None,
        count: Optional[int] = None,
        *,
        settings: Optional[SampleSettings] = None,
    ):
        """
        Create an empty accumulator.

        Args:
            name: Name of the Sample to build
            unit: Unit of measurement for all observations
            count: Expected number of observations. Only a sizing hint; more
                observations may be added.
            settings: Settings used by build() (default: process-wide settings)

        Raises:
            InvalidArgumentError: If count is lower than the threshold
        """
        if count is not None:
            threshold = (settings or get_settings()).threshold
            if count < threshold:
                raise InvalidArgumentError(
                    f"The count is lower than the threshold: {count} < {threshold}"
                )

        self._name = name
        self._unit = unit
        self._settings = settings
        self._expected_count = count
        self._observations: List[float] = []

    @property
    def name(self) -> Optional[str]:
        return self._name

    @name.setter
    def name(self, value: Optional[str]) -> None:
        self._name = value

    @property
    def unit(self) -> Optional[str]:
        return self._unit

    @unit.setter
    def unit(self, value: Optional[str]) -> None:
        self._unit = value

    @property
    def expected_count(self) -> Optional[int]:
        """Size hint given at construction, if any."""
        return self._expected_count

    @property
    def count(self) -> int:
        """Number of observations collected so far."""
        return len(self._observations)

    @property
    def observations(self) -> Tuple[float, ...]:
        """Snapshot of the observations collected so far."""
        return tuple(self._observations)

    def set_name(self, name: Optional[str]) -> 'ObservationAccumulator':
        """Set the name of the next Sample built. Returns self for chaining."""
        self._name = name
        return self

    def set_unit(self, unit: Optional[str]) -> 'ObservationAccumulator':
        """Set the unit of the next Sample built. Returns self for chaining."""
        self._unit = unit
        return self

    def add_observation(self, observation: float) -> 'ObservationAccumulator':
        """
        Add one observation.

        Args:
            observation: Finite number (not infinite, not NaN)

        Returns:
            self, for chaining

        Raises:
            InvalidObservationError: If the observation is not a finite number
                (strings and booleans are rejected, not converted)
        """
        if observation is None:
            raise InvalidObservationError("Observations must not be None.")
        if isinstance(observation, (str, bytes, bool, np.bool_)):
            raise InvalidObservationError(
                f"Observations must be numbers, got {type(observation).__name__} {observation!r}."
            )
        try:
            value = float(observation)
        except (TypeError, ValueError):
            raise InvalidObservationError(
                f"Observations must be numbers, got {observation!r}."
            ) from None

        if not math.isfinite(value):
            raise InvalidObservationError(f"Observations must be finite, got {value!r}.")

        self._observations.append(value)
        return self

    def add_observations(self, observations: Iterable[float]) -> 'ObservationAccumulator':
        """
        Add observations in order.

        Not transactional: if an observation is invalid, the ones before it
        stay added and the rest are skipped. Check `count` to see how far the
        batch got.

        Args:
            observations: Iterable of finite numbers (list, tuple, numpy array, ...)

        Returns:
            self, for chaining

        Raises:
            InvalidObservationError: On the first observation that is not a finite number
        """
        start = self.count
        try:
            for observation in observations:
                self.add_observation(observation)
        except InvalidObservationError:
            logger.warning(
                f"Batch add stopped after {self.count - start} observation(s) for sample {self._name!r}"
            )
            raise
        return self

    def reset(self) -> 'ObservationAccumulator':
        """Discard all collected observations. Name and unit are kept."""
        self._observations.clear()
        return self

    def build(self) -> Sample:
        """
        Build a Sample from the observations collected so far.

        The observations stay in the accumulator, so build() may be called
        again after adding more.

        Returns:
            New Sample with the current name, unit and a copy of the observations

        Raises:
            InsufficientSampleSizeError: If fewer observations than the threshold were added
        """
        settings = self._settings or get_settings()
        count = self.count
        if count < settings.threshold:
            raise InsufficientSampleSizeError(
                f"The sample does not contain enough observations: {count} < {settings.threshold}"
            )

        values = np.array(self._observations, dtype=np.float64)
        sample = Sample._from_validated(values, self._name, self._unit, self._settings)
        logger.debug(f"Built sample {sample.name!r} with {count} observations")
        return sample

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return f"ObservationAccumulator(name={self._name!r}, count={self.count})"

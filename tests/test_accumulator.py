"""
Tests for the ObservationAccumulator class.
"""

import math

import numpy as np
import pytest

from sample_statistics.core.errors import (
    InsufficientSampleSizeError,
    InvalidArgumentError,
    InvalidObservationError,
)
from sample_statistics.core.models.accumulator import ObservationAccumulator
from sample_statistics.core.models.options import SampleSettings, set_threshold
from sample_statistics.core.models.sample import Sample


class TestAccumulatorCreation:
    """Tests for ObservationAccumulator construction."""

    def test_create_empty(self):
        acc = ObservationAccumulator()

        assert acc.count == 0
        assert len(acc) == 0
        assert acc.name is None
        assert acc.unit is None
        assert acc.expected_count is None

    def test_create_with_name_and_unit(self):
        acc = ObservationAccumulator("Lap times", "s")
        assert acc.name == "Lap times"
        assert acc.unit == "s"

    def test_count_below_threshold_raises_error(self):
        with pytest.raises(InvalidArgumentError, match="lower than the threshold"):
            ObservationAccumulator("A", "m", count=39)

    def test_count_is_only_a_hint(self):
        """More observations than the size hint can be added."""
        acc = ObservationAccumulator("A", "m", count=40)
        acc.add_observations(range(60))

        assert acc.expected_count == 40
        assert acc.build().count == 60

    def test_count_checked_against_explicit_settings(self):
        acc = ObservationAccumulator(count=30, settings=SampleSettings(threshold=30))
        assert acc.expected_count == 30


class TestAddObservations:
    """Tests for adding observations."""

    def test_add_observation_chains(self):
        acc = ObservationAccumulator()
        assert acc.add_observation(1.0).add_observation(2) is acc
        assert acc.observations == (1.0, 2.0)

    @pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
    def test_non_finite_rejected(self, bad):
        """Non-finite observations raise and leave the count unchanged."""
        acc = ObservationAccumulator().add_observations([1.0, 2.0])

        with pytest.raises(InvalidObservationError, match="finite"):
            acc.add_observation(bad)
        assert acc.count == 2

    @pytest.mark.parametrize("bad", [None, "abc", "1.5", b"2", True, False, np.bool_(True), object()])
    def test_non_numbers_rejected(self, bad):
        acc = ObservationAccumulator()
        with pytest.raises(InvalidObservationError):
            acc.add_observation(bad)
        assert acc.count == 0

    def test_invalid_observation_is_value_error(self):
        with pytest.raises(ValueError):
            ObservationAccumulator().add_observation(float("nan"))

    def test_add_observations_from_numpy(self):
        acc = ObservationAccumulator().add_observations(np.arange(5, dtype=float))
        assert acc.observations == (0.0, 1.0, 2.0, 3.0, 4.0)
        assert all(type(v) is float for v in acc.observations)

    def test_add_observations_from_generator(self):
        acc = ObservationAccumulator().add_observations(x * 0.5 for x in range(4))
        assert acc.observations == (0.0, 0.5, 1.0, 1.5)

    def test_batch_failure_keeps_prefix(self, caplog):
        """A failed batch keeps the observations before the bad element."""
        acc = ObservationAccumulator("partial").add_observation(-1.0)

        with caplog.at_level("WARNING", logger="sample_statistics.core.models.accumulator"):
            with pytest.raises(InvalidObservationError):
                acc.add_observations([1.0, 2.0, math.inf, 3.0])

        assert acc.observations == (-1.0, 1.0, 2.0)
        assert "stopped after 2 observation(s)" in caplog.text

    def test_observations_snapshot_is_immutable(self):
        acc = ObservationAccumulator().add_observations([1.0, 2.0])
        snapshot = acc.observations
        acc.add_observation(3.0)

        assert snapshot == (1.0, 2.0)


class TestBuild:
    """Tests for building Samples."""

    def test_build_below_threshold_raises_error(self):
        acc = ObservationAccumulator().add_observations(range(39))

        with pytest.raises(InsufficientSampleSizeError, match="enough observations"):
            acc.build()

    def test_build_at_threshold(self):
        sample = ObservationAccumulator("exact").add_observations(range(40)).build()

        assert isinstance(sample, Sample)
        assert sample.count == 40
        assert sample.name == "exact"

    def test_build_uses_current_threshold(self):
        acc = ObservationAccumulator().add_observations(range(35))
        set_threshold(35)
        assert acc.build().count == 35

        set_threshold(36)
        with pytest.raises(InsufficientSampleSizeError):
            acc.build()

    def test_build_with_explicit_settings(self):
        settings = SampleSettings(threshold=30, precision=1)
        acc = ObservationAccumulator("custom", settings=settings).add_observations(range(30))

        sample = acc.build()
        assert sample.count == 30
        assert sample.settings is settings
        assert sample.summary.get_statistic("Mean") == "14.5"

    def test_build_preserves_order_and_values(self):
        values = [3.5, -1.25, 1e-9] * 20
        sample = ObservationAccumulator().add_observations(values).build()
        assert list(sample) == values

    def test_build_does_not_clear(self):
        """Repeated builds include every observation added so far."""
        acc = ObservationAccumulator("first", "m").add_observations(range(40))
        first = acc.build()

        acc.set_name("second").add_observations(range(40, 50))
        second = acc.build()

        assert first.count == 40
        assert first.name == "first"
        assert second.count == 50
        assert second.name == "second"
        assert list(second)[:40] == list(first)

    def test_built_sample_is_independent(self):
        acc = ObservationAccumulator().add_observations([1.0] * 40)
        sample = acc.build()
        acc.add_observation(100.0)

        assert sample.count == 40
        assert sample.sum == 40.0

    def test_name_and_unit_snapshot(self):
        acc = ObservationAccumulator().set_name("a").set_unit("kg").add_observations(range(40))
        sample = acc.build()
        acc.name = "b"
        acc.unit = "g"

        assert sample.name == "a"
        assert sample.unit == "kg"
        assert acc.build().unit == "g"

    def test_empty_unit_means_no_unit(self):
        sample = ObservationAccumulator("u", "").add_observations(range(40)).build()
        assert sample.unit == ""
        assert str(sample).startswith("0.0\n1.0\n")

    def test_reset(self):
        acc = ObservationAccumulator("r", "m").add_observations(range(45))
        assert acc.reset() is acc
        assert acc.count == 0
        assert acc.name == "r"
        with pytest.raises(InsufficientSampleSizeError):
            acc.build()

    def test_repr(self):
        acc = ObservationAccumulator("laps").add_observation(1.0)
        assert repr(acc) == "ObservationAccumulator(name='laps', count=1)"

"""Exceptions raised by the sample statistics package.

Every concrete error is also a :class:`ValueError`, so callers that only
care about bad input can catch that.
"""


class SampleStatisticsError(Exception):
    """Base class for all sample statistics errors."""


class InvalidArgumentError(SampleStatisticsError, ValueError):
    """Malformed constructor or configuration input.

    Raised for a missing value array, a threshold below the floor, a
    precision outside [1, 15] or an accumulator size hint below the threshold.
    """


class InvalidObservationError(SampleStatisticsError, ValueError):
    """An observation that is infinite, NaN or not a number."""


class InsufficientSampleSizeError(SampleStatisticsError, ValueError):
    """A sample was requested with fewer observations than the threshold."""


class SummaryFrozenError(SampleStatisticsError):
    """A statistic was added to a summary that has already been finalized."""

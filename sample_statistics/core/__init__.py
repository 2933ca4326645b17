"""
Core module for sample statistics.

Models (Sample, ObservationAccumulator, settings), the Summary report and the
error types. No I/O happens here.
"""

from .errors import (
    SampleStatisticsError,
    InvalidArgumentError,
    InvalidObservationError,
    InsufficientSampleSizeError,
    SummaryFrozenError,
)
from .models import Sample, ObservationAccumulator, SampleSettings
from .results import Summary

__all__ = [
    # Models
    "Sample",
    "ObservationAccumulator",
    "SampleSettings",

    # Results
    "Summary",

    # Errors
    "SampleStatisticsError",
    "InvalidArgumentError",
    "InvalidObservationError",
    "InsufficientSampleSizeError",
    "SummaryFrozenError",
]

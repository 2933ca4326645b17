"""
Sample Statistics

Descriptive statistics over a fixed sample of numeric observations, with a
minimum sample size and a fixed-width text report.

Conventions:
- Observations: finite floats, kept in insertion order
- Variance / Std Dev: population formulas (divide by N)
- Threshold: minimum sample size, default 40, never below 30
- Precision: decimals in formatted statistics, default 3, range 1-15
"""

__version__ = "1.0.0"

from .core.errors import (
    SampleStatisticsError,
    InvalidArgumentError,
    InvalidObservationError,
    InsufficientSampleSizeError,
    SummaryFrozenError,
)
from .core.models import (
    Sample,
    ObservationAccumulator,
    SampleSettings,
    get_settings,
    set_settings,
    get_threshold,
    set_threshold,
    get_precision,
    set_precision,
    reset_settings,
)
from .core.results import Summary

__all__ = [
    # Version
    "__version__",

    # Models
    "Sample",
    "ObservationAccumulator",
    "SampleSettings",

    # Settings
    "get_settings",
    "set_settings",
    "get_threshold",
    "set_threshold",
    "get_precision",
    "set_precision",
    "reset_settings",

    # Results
    "Summary",

    # Errors
    "SampleStatisticsError",
    "InvalidArgumentError",
    "InvalidObservationError",
    "InsufficientSampleSizeError",
    "SummaryFrozenError",
]

"""
Data models for sample statistics.

This module provides the core data structures:
- SampleSettings: Threshold and precision, plus the process-wide settings
- Sample: Immutable observations with descriptive statistics
- ObservationAccumulator: Collects observations and builds Samples
"""

from .options import (
    SampleSettings,
    DEFAULT_THRESHOLD,
    MINIMUM_THRESHOLD,
    DEFAULT_PRECISION,
    MINIMUM_PRECISION,
    MAXIMUM_PRECISION,
    get_settings,
    set_settings,
    get_threshold,
    set_threshold,
    get_precision,
    set_precision,
    reset_settings,
)
from .sample import Sample
from .accumulator import ObservationAccumulator

__all__ = [
    # Settings
    "SampleSettings",
    "DEFAULT_THRESHOLD",
    "MINIMUM_THRESHOLD",
    "DEFAULT_PRECISION",
    "MINIMUM_PRECISION",
    "MAXIMUM_PRECISION",
    "get_settings",
    "set_settings",
    "get_threshold",
    "set_threshold",
    "get_precision",
    "set_precision",
    "reset_settings",

    # Sample
    "Sample",
    "ObservationAccumulator",
]

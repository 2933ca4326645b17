"""
Settings for sample construction and report formatting.

Two knobs control every Sample:
- threshold: minimum number of observations a Sample must hold
- precision: digits after the decimal point in formatted statistics

Settings live in an immutable SampleSettings object. Samples and accumulators
accept one explicitly; when they don't, they read the process-wide settings
managed by the functions at the bottom of this module.
"""

import logging
import os
import threading
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 40
MINIMUM_THRESHOLD = 30

DEFAULT_PRECISION = 3
MINIMUM_PRECISION = 1
MAXIMUM_PRECISION = 15

THRESHOLD_ENV_VAR = "SAMPLE_STATS_THRESHOLD"
PRECISION_ENV_VAR = "SAMPLE_STATS_PRECISION"


def _env_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw = environ.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(f"{key} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class SampleSettings:
    """
    Validation and formatting settings for samples.

    Attributes:
        threshold: Minimum sample size (default: 40, never below 30)
        precision: Digits after the decimal point in summaries (default: 3, range 1-15)
    """

    threshold: int = DEFAULT_THRESHOLD
    precision: int = DEFAULT_PRECISION

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.threshold < MINIMUM_THRESHOLD:
            raise InvalidArgumentError(
                f"Value of threshold is too low: {self.threshold} < {MINIMUM_THRESHOLD}"
            )

        if not MINIMUM_PRECISION <= self.precision <= MAXIMUM_PRECISION:
            raise InvalidArgumentError(
                f"Invalid precision value {self.precision}, "
                f"expected {MINIMUM_PRECISION} to {MAXIMUM_PRECISION}"
            )

    def format_value(self, value: float) -> str:
        """Format a statistic in fixed-point notation with `precision` decimals."""
        return f"{value:.{self.precision}f}"

    def with_threshold(self, threshold: int) -> 'SampleSettings':
        """Return a copy with a different threshold."""
        return replace(self, threshold=threshold)

    def with_precision(self, precision: int) -> 'SampleSettings':
        """Return a copy with a different precision."""
        return replace(self, precision=precision)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize settings to dictionary."""
        return {
            "threshold": self.threshold,
            "precision": self.precision,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SampleSettings':
        """Create SampleSettings from a dictionary, filling gaps with defaults."""
        return cls(
            threshold=int(data.get("threshold", DEFAULT_THRESHOLD)),
            precision=int(data.get("precision", DEFAULT_PRECISION)),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'SampleSettings':
        """
        Create SampleSettings from environment variables.

        Reads SAMPLE_STATS_THRESHOLD and SAMPLE_STATS_PRECISION; unset or
        empty variables fall back to the defaults.

        Args:
            environ: Mapping to read from (default: os.environ)

        Raises:
            InvalidArgumentError: If a variable is not an integer or out of range
        """
        if environ is None:
            environ = os.environ
        return cls(
            threshold=_env_int(environ, THRESHOLD_ENV_VAR, DEFAULT_THRESHOLD),
            precision=_env_int(environ, PRECISION_ENV_VAR, DEFAULT_PRECISION),
        )

    @classmethod
    def default(cls) -> 'SampleSettings':
        """Create settings with default values."""
        return cls()

    def __repr__(self) -> str:
        return f"SampleSettings(threshold={self.threshold}, precision={self.precision})"


# =============================================================================
# Process-wide settings
# =============================================================================

def _initial_settings() -> SampleSettings:
    try:
        return SampleSettings.from_env()
    except InvalidArgumentError as e:
        logger.warning(f"Ignoring sample settings from environment: {e}")
        return SampleSettings()


_lock = threading.Lock()
_current = _initial_settings()


def get_settings() -> SampleSettings:
    """Return the current process-wide settings snapshot."""
    with _lock:
        return _current


def set_settings(settings: SampleSettings) -> None:
    """Replace the process-wide settings."""
    global _current
    if not isinstance(settings, SampleSettings):
        raise InvalidArgumentError(f"Expected SampleSettings, got {type(settings).__name__}")
    with _lock:
        _current = settings
    logger.info(f"Sample settings changed: {settings!r}")


def get_threshold() -> int:
    """Return the current minimum sample size."""
    return get_settings().threshold


def set_threshold(threshold: int) -> None:
    """
    Update the minimum sample size.

    Raises:
        InvalidArgumentError: If threshold is below MINIMUM_THRESHOLD
    """
    global _current
    with _lock:
        _current = _current.with_threshold(threshold)
    logger.info(f"Sample threshold set to {threshold}")


def get_precision() -> int:
    """Return the current number of decimals used in summaries."""
    return get_settings().precision


def set_precision(precision: int) -> None:
    """
    Update the number of decimals used in summaries built from now on.

    Raises:
        InvalidArgumentError: If precision is outside [1, 15]
    """
    global _current
    with _lock:
        _current = _current.with_precision(precision)
    logger.info(f"Sample precision set to {precision}")


def reset_settings() -> SampleSettings:
    """Restore the process-wide settings from the environment defaults."""
    global _current
    settings = SampleSettings.from_env()
    with _lock:
        _current = settings
    logger.info(f"Sample settings reset: {settings!r}")
    return settings

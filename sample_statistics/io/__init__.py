"""Observation file readers."""

from .observations import (
    parse_observations_csv,
    parse_observations_text,
    accumulator_from_file,
)

__all__ = [
    "parse_observations_csv",
    "parse_observations_text",
    "accumulator_from_file",
]

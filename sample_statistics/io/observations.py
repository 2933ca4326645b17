"""Observation file parsing utilities.

Supported formats:
- CSV with a header row; one column holds the observation values
- plain text with one observation per line

Parsed values are plain floats. Finiteness is checked by the accumulator,
so a file containing "inf" or "nan" fails when its values are added.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..core.models.accumulator import ObservationAccumulator
from ..core.models.options import SampleSettings

logger = logging.getLogger(__name__)

VALUE_COLUMNS = ("value", "observation", "obs", "x")


def _find_column(fieldnames: Sequence[str] | None, column: str | None, path: Path) -> str:
    names = list(fieldnames or [])
    if column is not None:
        if column not in names:
            raise ValueError(f"Column '{column}' not found in {path}")
        return column
    lowered: Dict[str, str] = {name.strip().lower(): name for name in names}
    for key in VALUE_COLUMNS:
        if key in lowered:
            return lowered[key]
    raise ValueError(f"No value column ({', '.join(VALUE_COLUMNS)}) found in {path}")


def _parse_float(text: str, path: Path, line_no: int) -> float:
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"Invalid observation {text!r} in {path}, line {line_no}") from None


def parse_observations_csv(path: str | Path, column: str | None = None) -> List[float]:
    """Parse observation values from a CSV.

    Expected columns (flexible):
      - value/observation/obs/x, or the column named by ``column``

    Blank cells are skipped.
    """

    path = Path(path)
    out: List[float] = []

    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        key = _find_column(reader.fieldnames, column, path)
        for row in reader:
            raw = (row.get(key) or "").strip()
            if not raw:
                continue
            out.append(_parse_float(raw, path, reader.line_num))

    logger.debug(f"Parsed {len(out)} observations from {path}")
    return out


def parse_observations_text(path: str | Path) -> List[float]:
    """Parse observation values from a text file, one per line.

    Blank lines and lines starting with ``#`` are ignored.
    """

    path = Path(path)
    out: List[float] = []

    with path.open(encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            s = line.strip()
            if not s or s.startswith("#"):
                continue
            out.append(_parse_float(s, path, line_no))

    logger.debug(f"Parsed {len(out)} observations from {path}")
    return out


def accumulator_from_file(
    path: str | Path,
    name: Optional[str] = None,
    unit: Optional[str] = None,
    settings: Optional[SampleSettings] = None,
    column: Optional[str] = None,
) -> ObservationAccumulator:
    """Read observations from a file into a new accumulator.

    ``.csv`` files go through :func:`parse_observations_csv`, anything else
    through :func:`parse_observations_text`. The sample name defaults to the
    file stem.
    """

    path = Path(path)
    if path.suffix.lower() == ".csv":
        values = parse_observations_csv(path, column=column)
    else:
        values = parse_observations_text(path)

    acc = ObservationAccumulator(name=name or path.stem, unit=unit, settings=settings)
    return acc.add_observations(values)

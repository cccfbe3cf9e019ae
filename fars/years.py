"""Batch loading of several FARS years, isolating per-year failures."""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd

from . import config
from .errors import CorruptFileError, InvalidYearError, InvalidYearWarning
from .reader import parse_year, read_table, resolve_path

logger = logging.getLogger(__name__)

# Failures that turn one year of a batch into a warning instead of an error.
LOAD_ERRORS = (
    OSError,
    CorruptFileError,
    UnicodeDecodeError,
    pd.errors.ParserError,
    pd.errors.EmptyDataError,
    KeyError,
    InvalidYearError,
)


@dataclass(frozen=True)
class YearResult:
    """Outcome of loading one requested year: a reduced table or the error."""

    year: object
    table: pd.DataFrame | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.table is not None


def reduce_table(data: pd.DataFrame, year: int) -> pd.DataFrame:
    """Project a full year table to its MONTH column plus a constant year column."""
    reduced = data[[config.MONTH_COLUMN]].copy()
    reduced[config.YEAR_COLUMN] = year
    return reduced


def _read_year(year, data_dir: str | Path | None) -> pd.DataFrame:
    parsed = parse_year(year)
    data = read_table(resolve_path(parsed, data_dir))
    return reduce_table(data, parsed)


def read_years(years: Iterable, data_dir: str | Path | None = None) -> list[YearResult]:
    """Load each year independently; failed years carry their error instead of a table."""
    results: list[YearResult] = []
    for year in years:
        try:
            table = _read_year(year, data_dir)
        except LOAD_ERRORS as exc:
            logger.warning("Skipping year %r: %s", year, exc)
            warnings.warn(f"invalid year: {year}", InvalidYearWarning, stacklevel=2)
            results.append(YearResult(year=year, error=exc))
            continue
        results.append(YearResult(year=year, table=table))
    return results


def load_years(years: Iterable, data_dir: str | Path | None = None) -> list[pd.DataFrame | None]:
    """Return one reduced (MONTH, year) table per requested year, None where loading failed."""
    return [result.table for result in read_years(years, data_dir)]

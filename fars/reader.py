"""Locate and read one year of FARS accident data."""

from __future__ import annotations

import errno
import logging
import numbers
import warnings
from pathlib import Path

import pandas as pd

from . import config
from .errors import CorruptFileError, InvalidYearError, StateConversionError

logger = logging.getLogger(__name__)


def _as_int(value) -> int | None:
    """Convert a year/state-like value to int, returning None if it is not integral."""
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        number = float(value)
        return int(number) if number.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def parse_year(value) -> int:
    """Return ``value`` as an integer year or raise InvalidYearError."""
    year = _as_int(value)
    if year is None:
        raise InvalidYearError(value)
    return year


def parse_state(value) -> int:
    """Return ``value`` as a positive integer state code or raise StateConversionError."""
    state = _as_int(value)
    if state is None or state <= 0:
        raise StateConversionError(value)
    return state


def make_filename(year) -> str:
    """Return the data file name for ``year``, e.g. ``accident_2013.csv.bz2``."""
    return config.FILENAME_TEMPLATE.format(year=parse_year(year))


def resolve_path(year, data_dir: str | Path | None = None) -> Path:
    directory = Path(data_dir) if data_dir is not None else config.DATA_DIR
    return directory / make_filename(year)


def read_csv_with_fallback(path: Path) -> pd.DataFrame:
    """Read compressed CSV content while trying multiple encodings."""
    last_error: Exception | None = None
    for encoding in config.CSV_ENCODINGS:
        try:
            with warnings.catch_warnings():
                warnings.simplefilter('ignore', pd.errors.DtypeWarning)
                return pd.read_csv(path, compression='bz2', encoding=encoding, low_memory=False)
        except UnicodeDecodeError as exc:
            logger.debug("Could not decode %s as %s", path, encoding)
            last_error = exc
            continue
    if last_error:
        raise last_error
    raise ValueError(f"Failed to read CSV file: {path}")


def read_table(filename: str | Path) -> pd.DataFrame:
    """Read a whole FARS accident file into a DataFrame.

    Raises FileNotFoundError carrying ``filename`` when the file is absent and
    CorruptFileError when the bzip2 stream is truncated or not bzip2 at all.
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(errno.ENOENT, f"file '{filename}' does not exist", str(filename))
    try:
        data = read_csv_with_fallback(path)
    except FileNotFoundError:
        raise
    except (EOFError, OSError) as exc:
        raise CorruptFileError(filename, exc) from exc
    logger.debug("Loaded %d rows from %s", len(data), path)
    return data

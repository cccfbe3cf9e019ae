"""Plot the accident locations of one state for one FARS year."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from . import config
from .errors import InvalidStateError
from .reader import parse_state, parse_year, read_table, resolve_path
from .render import AltairRenderer, Extent, Renderer

logger = logging.getLogger(__name__)


def sanitize_coordinates(data: pd.DataFrame) -> pd.DataFrame:
    """Replace sentinel LONGITUD (> 900) and LATITUDE (> 90) values with NaN."""
    clean = data.copy()
    lon = pd.to_numeric(clean[config.LONGITUDE_COLUMN], errors='coerce')
    lat = pd.to_numeric(clean[config.LATITUDE_COLUMN], errors='coerce')
    clean[config.LONGITUDE_COLUMN] = lon.mask(lon > config.LONGITUDE_SENTINEL, np.nan)
    clean[config.LATITUDE_COLUMN] = lat.mask(lat > config.LATITUDE_SENTINEL, np.nan)
    return clean


def coordinate_extent(data: pd.DataFrame) -> Extent | None:
    """Return the bounding box of the coordinates, ignoring NaN; None if nothing is left."""
    lon = data[config.LONGITUDE_COLUMN].dropna()
    lat = data[config.LATITUDE_COLUMN].dropna()
    if lon.empty or lat.empty:
        return None
    return Extent(float(lon.min()), float(lon.max()), float(lat.min()), float(lat.max()))


def filter_state(data: pd.DataFrame, state) -> pd.DataFrame:
    """Return the rows of ``state``, raising InvalidStateError if the code is not in the data."""
    state_num = parse_state(state)
    states = pd.to_numeric(data[config.STATE_COLUMN], errors='coerce')
    if state_num not in set(states.dropna().astype(int).unique()):
        raise InvalidStateError(state)
    return data.loc[states == state_num]


def map_state(
    state,
    year,
    data_dir: str | Path | None = None,
    renderer: Renderer | None = None,
) -> None:
    """Render the accident locations for ``state`` in ``year`` over state outlines.

    Raises FileNotFoundError when the year's file is missing,
    StateConversionError when ``state`` is not a positive integer and
    InvalidStateError when it does not occur in that year's data.
    """
    year_num = parse_year(year)
    data = read_table(resolve_path(year_num, data_dir))
    subset = filter_state(data, state)
    if subset.empty:
        logger.info("no accidents to plot")
        return None

    points = sanitize_coordinates(subset).dropna(
        subset=[config.LONGITUDE_COLUMN, config.LATITUDE_COLUMN]
    )
    extent = coordinate_extent(points)
    if extent is None:
        logger.info("no valid coordinates to plot")
        return None

    if renderer is None:
        renderer = AltairRenderer()
    state_num = parse_state(state)
    logger.info("Plotting %d accident(s) for state %d in %d", len(points), state_num, year_num)
    renderer.render(points, extent, title=f"FARS accidents, state {state_num}, {year_num}")
    return None

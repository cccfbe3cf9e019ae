"""Load FARS accident files, summarize them by month and map them by state."""

from .boundaries import load_state_boundaries
from .errors import (
    CorruptFileError,
    FarsError,
    InvalidStateError,
    InvalidYearError,
    InvalidYearWarning,
    NoValidDataError,
    StateConversionError,
    TypeConversionError,
)
from .mapping import coordinate_extent, map_state, sanitize_coordinates
from .reader import make_filename, parse_state, parse_year, read_table
from .render import AltairRenderer, Extent, Renderer
from .summary import summarize_years, summary_chart
from .years import YearResult, load_years, read_years

__all__ = [
    "AltairRenderer",
    "CorruptFileError",
    "Extent",
    "FarsError",
    "InvalidStateError",
    "InvalidYearError",
    "InvalidYearWarning",
    "NoValidDataError",
    "Renderer",
    "StateConversionError",
    "TypeConversionError",
    "YearResult",
    "coordinate_extent",
    "load_state_boundaries",
    "load_years",
    "make_filename",
    "map_state",
    "parse_state",
    "parse_year",
    "read_table",
    "read_years",
    "sanitize_coordinates",
    "summarize_years",
    "summary_chart",
]

__version__ = "0.1.0"

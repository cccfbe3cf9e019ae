"""Constants shared by the FARS loaders, summarizer and map renderer."""

from __future__ import annotations

from pathlib import Path

FILENAME_TEMPLATE = "accident_{year:d}.csv.bz2"
DATA_DIR = Path(".")
CSV_ENCODINGS = ('utf-8', 'latin1')

STATE_COLUMN = 'STATE'
MONTH_COLUMN = 'MONTH'
LATITUDE_COLUMN = 'LATITUDE'
LONGITUDE_COLUMN = 'LONGITUD'
YEAR_COLUMN = 'year'

# Values above these thresholds are "unknown" markers in the source data.
LATITUDE_SENTINEL = 90
LONGITUDE_SENTINEL = 900

MONTH_LABELS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
                'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']
CHART_WIDTH = 820  # ~8.5in at ~96dpi
CHART_HEIGHT = 550  # ~5.5in at ~100dpi
MAP_POINT_SIZE = 4


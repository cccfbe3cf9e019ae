import pandas as pd
import pytest


def write_year(directory, year, rows):
    """Write ``rows`` as accident_<year>.csv.bz2 inside ``directory``."""
    path = directory / f"accident_{year}.csv.bz2"
    pd.DataFrame(rows, columns=['STATE', 'ST_CASE', 'MONTH', 'LATITUDE', 'LONGITUD']).to_csv(
        path, index=False, compression='bz2'
    )
    return path


# 3 January and 2 February accidents; state 12 has one sentinel longitude,
# state 4 one sentinel latitude.
ROWS_2013 = [
    (12, 120001, 1, 25.3, -80.5),
    (12, 120002, 1, 27.9, -82.4),
    (12, 120003, 2, 30.1, 999.9),
    (4, 40001, 1, 95.0, -111.9),
    (4, 40002, 2, 33.4, -112.0),
]

ROWS_2014 = [
    (12, 120101, 1, 26.1, -80.2),
    (12, 120102, 3, 28.5, -81.3),
    (1, 10101, 3, 32.3, -86.3),
    (1, 10102, 12, 34.7, -86.6),
]


@pytest.fixture
def data_dir(tmp_path):
    write_year(tmp_path, 2013, ROWS_2013)
    write_year(tmp_path, 2014, ROWS_2014)
    return tmp_path


class RecordingRenderer:
    """Renderer double that keeps what it was asked to draw."""

    def __init__(self):
        self.calls = []

    def render(self, points, extent, title):
        self.calls.append((points.copy(), extent, title))


@pytest.fixture
def renderer():
    return RecordingRenderer()


# Two rectangular outlines: one around the 2013 Florida rows, one far away.
OUTLINES = {
    'type': 'FeatureCollection',
    'features': [
        {
            'type': 'Feature',
            'properties': {'name': 'Peninsula'},
            'geometry': {
                'type': 'MultiLineString',
                'coordinates': [[[-87.6, 24.5], [-80.0, 24.5], [-80.0, 31.0], [-87.6, 31.0], [-87.6, 24.5]]],
            },
        },
        {
            'type': 'Feature',
            'properties': {'name': 'Faraway'},
            'geometry': {
                'type': 'MultiLineString',
                'coordinates': [[[-150.0, 60.0], [-140.0, 60.0], [-140.0, 65.0], [-150.0, 60.0]]],
            },
        },
    ],
}


@pytest.fixture
def outlines():
    return OUTLINES

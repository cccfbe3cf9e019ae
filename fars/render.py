"""Chart rendering for state accident maps."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import altair as alt
import pandas as pd
import vl_convert as vlc

from . import config
from .boundaries import features_in_extent, load_state_boundaries, read_boundaries

logger = logging.getLogger(__name__)

# Half-width in degrees applied when all points share one coordinate.
MIN_SPAN = 0.5
OUTPUT_SUFFIXES = ('.png', '.svg', '.html', '.json')


@dataclass(frozen=True)
class Extent:
    """Longitude/latitude bounding box of the valid coordinates."""

    lon_min: float
    lon_max: float
    lat_min: float
    lat_max: float

    def padded(self, span: float = MIN_SPAN) -> "Extent":
        lon_min, lon_max = self.lon_min, self.lon_max
        lat_min, lat_max = self.lat_min, self.lat_max
        if lon_max - lon_min < span:
            lon_min, lon_max = lon_min - span, lon_max + span
        if lat_max - lat_min < span:
            lat_min, lat_max = lat_min - span, lat_max + span
        return Extent(lon_min, lon_max, lat_min, lat_max)

    def to_geojson(self) -> dict:
        return {
            'type': 'Feature',
            'properties': {},
            'geometry': {
                'type': 'MultiPoint',
                'coordinates': [[self.lon_min, self.lat_min], [self.lon_max, self.lat_max]],
            },
        }


class Renderer(Protocol):
    def render(self, points: pd.DataFrame, extent: Extent, title: str) -> None:
        ...


def chart_to_png_bytes(chart: alt.TopLevelMixin, scale: float = 1.0) -> bytes:
    """Convert an Altair chart into PNG bytes."""
    spec = chart.to_dict()
    return vlc.vegalite_to_png(spec, scale=scale)


def check_output(output: str | Path) -> Path:
    """Return ``output`` as a Path, raising ValueError for unsupported suffixes."""
    path = Path(output)
    if path.suffix.lower() not in OUTPUT_SUFFIXES:
        raise ValueError(
            f"Unsupported output type: {path.suffix or path.name} (use one of {', '.join(OUTPUT_SUFFIXES)})"
        )
    return path


def save_chart(chart: alt.TopLevelMixin, output: str | Path) -> Path:
    """Write a chart to ``output``; the suffix picks PNG, SVG, HTML or JSON."""
    path = check_output(output)
    suffix = path.suffix.lower()
    if suffix == '.png':
        path.write_bytes(chart_to_png_bytes(chart))
    elif suffix == '.svg':
        path.write_text(vlc.vegalite_to_svg(chart.to_dict()), encoding='utf-8')
    else:
        chart.save(str(path))
    logger.info("Wrote chart to %s", path)
    return path


class AltairRenderer:
    """Draw state outlines around the extent and overlay one point per accident.

    ``boundaries`` is a GeoJSON FeatureCollection or the path of a local
    GeoJSON file; by default the bundled US state outlines are used. The
    outlines are embedded in the chart, so rendering never fetches data.
    """

    def __init__(
        self,
        output: str | Path | None = None,
        boundaries: dict | str | Path | None = None,
    ) -> None:
        self.output = check_output(output) if output is not None else None
        self.boundaries = boundaries
        self.chart: alt.LayerChart | None = None

    def boundary_collection(self) -> dict:
        if self.boundaries is None:
            return load_state_boundaries()
        if isinstance(self.boundaries, dict):
            return self.boundaries
        return read_boundaries(self.boundaries)

    def build_chart(self, points: pd.DataFrame, extent: Extent, title: str) -> alt.LayerChart:
        padded = extent.padded()
        fit = padded.to_geojson()
        outlines = features_in_extent(self.boundary_collection(), padded)
        if not outlines:
            logger.warning("No boundary outlines overlap %s", padded)
        outline = (
            alt.Chart(alt.InlineData(values=outlines))
            .mark_geoshape(filled=False, stroke='#000', strokeWidth=0.6, clip=True)
            .project(type='mercator', fit=fit)
        )
        coords = points[[config.LONGITUDE_COLUMN, config.LATITUDE_COLUMN]].reset_index(drop=True)
        markers = (
            alt.Chart(coords)
            .mark_circle(size=config.MAP_POINT_SIZE, color='black', opacity=0.9)
            .encode(
                longitude=f'{config.LONGITUDE_COLUMN}:Q',
                latitude=f'{config.LATITUDE_COLUMN}:Q',
            )
            .project(type='mercator', fit=fit)
        )
        return alt.layer(outline, markers).properties(
            width=min(config.CHART_WIDTH, 850),
            height=min(config.CHART_HEIGHT, 520),
            title=alt.TitleParams(text=title, color='#000', fontSize=16, anchor='start'),
        ).configure_view(
            stroke='transparent',
        ).configure(background='white')

    def render(self, points: pd.DataFrame, extent: Extent, title: str) -> None:
        self.chart = self.build_chart(points, extent, title)
        if self.output is not None:
            save_chart(self.chart, self.output)

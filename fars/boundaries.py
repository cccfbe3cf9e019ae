"""US state outlines as inline GeoJSON, so maps render without network access."""

from __future__ import annotations

import json
import math
from functools import lru_cache
from pathlib import Path


def _rings(lons, lats):
    """Split NaN-separated coordinate lists into [lon, lat] rings."""
    ring = []
    for lon, lat in zip(lons, lats):
        if math.isnan(lon) or math.isnan(lat):
            if ring:
                yield ring
                ring = []
            continue
        ring.append([float(lon), float(lat)])
    if ring:
        yield ring


def outline_feature(name: str, lons, lats) -> dict:
    """Return a MultiLineString feature tracing one boundary."""
    return {
        'type': 'Feature',
        'properties': {'name': name},
        'geometry': {'type': 'MultiLineString', 'coordinates': list(_rings(lons, lats))},
    }


@lru_cache(maxsize=1)
def load_state_boundaries() -> dict:
    """Return the US state outlines bundled with ``bokeh_sampledata`` as a FeatureCollection."""
    # Imported here: the module parses the boundary file on import.
    from bokeh_sampledata.us_states import data as us_states

    features = [
        outline_feature(state['name'], state['lons'], state['lats'])
        for _, state in sorted(us_states.items())
    ]
    return {'type': 'FeatureCollection', 'features': features}


def read_boundaries(path: str | Path) -> dict:
    """Read a GeoJSON FeatureCollection from a local file."""
    with open(path, encoding='utf-8') as handle:
        collection = json.load(handle)
    if not collection.get('features'):
        raise ValueError(f"No boundary features in {path}")
    return collection


def _coordinates(geometry: dict):
    """Yield every [lon, lat] pair of a (Multi)LineString or (Multi)Polygon geometry."""
    stack = [geometry['coordinates']]
    while stack:
        item = stack.pop()
        if item and isinstance(item[0], (int, float)):
            yield item
        else:
            stack.extend(item)


def features_in_extent(collection: dict, extent) -> list[dict]:
    """Keep the features whose bounding box overlaps ``extent``."""
    kept = []
    for feature in collection['features']:
        coords = list(_coordinates(feature['geometry']))
        if not coords:
            continue
        lons = [lon for lon, _ in (c[:2] for c in coords)]
        lats = [lat for _, lat in (c[:2] for c in coords)]
        if (min(lons) <= extent.lon_max and max(lons) >= extent.lon_min
                and min(lats) <= extent.lat_max and max(lats) >= extent.lat_min):
            kept.append(feature)
    return kept

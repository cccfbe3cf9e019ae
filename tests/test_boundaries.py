"""
Tests for the embedded state outline data.
"""

import json
import math

import pytest

from fars.boundaries import features_in_extent, outline_feature, read_boundaries
from fars.render import Extent


class TestOutlineFeature:
    def test_nan_separates_rings(self):
        feature = outline_feature("Two Parts", [-80.0, -81.0, math.nan, -82.0, -83.0], [25.0, 26.0, math.nan, 27.0, 28.0])
        assert feature["geometry"]["type"] == "MultiLineString"
        assert feature["geometry"]["coordinates"] == [
            [[-80.0, 25.0], [-81.0, 26.0]],
            [[-82.0, 27.0], [-83.0, 28.0]],
        ]
        assert feature["properties"]["name"] == "Two Parts"


class TestFeaturesInExtent:
    def test_keeps_overlapping_outlines_only(self, outlines):
        kept = features_in_extent(outlines, Extent(-82.4, -80.5, 25.3, 27.9))
        assert [f["properties"]["name"] for f in kept] == ["Peninsula"]

    def test_polygon_geometries_are_supported(self):
        collection = {"type": "FeatureCollection", "features": [{
            "type": "Feature",
            "properties": {},
            "geometry": {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]]},
        }]}
        assert len(features_in_extent(collection, Extent(0.5, 0.6, 0.5, 0.6))) == 1
        assert features_in_extent(collection, Extent(5, 6, 5, 6)) == []


class TestReadBoundaries:
    def test_reads_local_file(self, tmp_path, outlines):
        path = tmp_path / "outlines.geojson"
        path.write_text(json.dumps(outlines))
        assert read_boundaries(path) == outlines

    def test_empty_collection_raises(self, tmp_path):
        path = tmp_path / "empty.geojson"
        path.write_text(json.dumps({"type": "FeatureCollection", "features": []}))
        with pytest.raises(ValueError):
            read_boundaries(path)


def test_bundled_state_outlines():
    pytest.importorskip("bokeh_sampledata.us_states")
    from fars.boundaries import load_state_boundaries

    collection = load_state_boundaries()
    names = {f["properties"]["name"] for f in collection["features"]}
    assert "Florida" in names
    florida = features_in_extent(collection, Extent(-82.4, -80.5, 25.3, 27.9))
    assert "Florida" in {f["properties"]["name"] for f in florida}

"""
Tests for the ``python -m fars`` command line.
"""

import json

import pytest

from fars.cli import main
from fars.errors import InvalidYearWarning


@pytest.fixture
def outlines_file(tmp_path, outlines):
    path = tmp_path / "outlines.geojson"
    path.write_text(json.dumps(outlines))
    return path


def test_summary_prints_table(data_dir, capsys):
    assert main(["--data-dir", str(data_dir), "summary", "2013", "2014"]) == 0
    out = capsys.readouterr().out
    assert "MONTH" in out
    assert "2013" in out and "2014" in out


def test_summary_writes_chart(data_dir, tmp_path):
    chart = tmp_path / "summary.json"
    assert main(["--data-dir", str(data_dir), "summary", "2013", "--chart", str(chart)]) == 0
    assert chart.exists()


def test_summary_without_data_fails(data_dir, capsys):
    with pytest.warns(InvalidYearWarning):
        assert main(["--data-dir", str(data_dir), "summary", "1980"]) == 1
    assert "no valid data" in capsys.readouterr().err


def test_map_writes_output(data_dir, tmp_path, outlines_file):
    output = tmp_path / "fl.json"
    argv = ["--data-dir", str(data_dir), "map", "12", "2013", "--output", str(output),
            "--boundaries", str(outlines_file)]
    assert main(argv) == 0
    assert output.exists()


def test_map_invalid_state_fails(data_dir, tmp_path, capsys, outlines_file):
    output = tmp_path / "x.json"
    argv = ["--data-dir", str(data_dir), "map", "50", "2013", "--output", str(output),
            "--boundaries", str(outlines_file)]
    assert main(argv) == 1
    assert "invalid STATE number: 50" in capsys.readouterr().err
    assert not output.exists()


def test_map_unsupported_output_is_a_usage_error(data_dir, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--data-dir", str(data_dir), "map", "12", "2013", "--output", "fl.gif"])
    assert excinfo.value.code == 2
    assert "Unsupported output type" in capsys.readouterr().err


def test_summary_unsupported_chart_is_a_usage_error(data_dir):
    with pytest.raises(SystemExit) as excinfo:
        main(["--data-dir", str(data_dir), "summary", "2013", "--chart", "summary.gif"])
    assert excinfo.value.code == 2

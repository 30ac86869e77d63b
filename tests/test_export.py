"""CSV / JSON output of generated sequences."""

import json

import pytest

from fairnum.export import load_values, write_records


def test_csv_append_and_load(tmp_path):
    path = str(tmp_path / "crash.csv")
    write_records(path, [{"nonce": 0, "value": 1.5}, {"nonce": 1, "value": 2.25}])
    write_records(path, [{"nonce": 2, "value": 1.0}])
    values = load_values(path, "value")
    assert list(values) == [1.5, 2.25, 1.0]


def test_json_append_and_load(tmp_path):
    path = str(tmp_path / "crash.json")
    assert write_records(path, [{"nonce": 0, "value": 3.0}]) == 1
    write_records(path, [{"nonce": 1, "value": "bad"}, {"nonce": 2, "value": 4.0}])
    data = json.loads((tmp_path / "crash.json").read_text())
    assert len(data) == 3
    assert list(load_values(path, "value")) == [3.0, 4.0]


def test_unsupported_formats(tmp_path):
    with pytest.raises(ValueError):
        write_records(str(tmp_path / "out.txt"), [{"value": 1}])
    with pytest.raises(ValueError):
        load_values(str(tmp_path / "in.txt"), "value")


def test_missing_column(tmp_path):
    path = str(tmp_path / "crash.csv")
    write_records(path, [{"value": 1.0}])
    with pytest.raises(ValueError):
        load_values(path, "multiplier")

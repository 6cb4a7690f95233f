"""Tests for the JSON data loader."""
import json

import pytest

from collegeportal.data import DataLoader


def test_loads_wrapped_grade_sheet(data_dir) -> None:
    records = DataLoader(data_dir).load_grade_sheet("semester.json")
    assert [r["subject_code"] for r in records] == ["CS3501", "CS3591"]


def test_loads_bare_list(data_dir) -> None:
    records = DataLoader(data_dir).load_announcements("announcements.json")
    assert len(records) == 3


def test_absolute_paths_bypass_data_dir(data_dir, tmp_path_factory) -> None:
    loader = DataLoader(tmp_path_factory.mktemp("elsewhere"))
    assert len(loader.load_announcements(data_dir / "announcements.json")) == 3


def test_missing_file(data_dir) -> None:
    with pytest.raises(FileNotFoundError):
        DataLoader(data_dir).load_grade_sheet("nope.json")


def test_results_are_cached(data_dir) -> None:
    loader = DataLoader(data_dir)
    first = loader.load_json("semester.json")
    (data_dir / "semester.json").write_text(json.dumps([]), encoding="utf-8")

    assert loader.load_json("semester.json") is first
    loader.clear_cache()
    assert loader.load_json("semester.json") == []


def test_rejects_non_list_payload(data_dir) -> None:
    (data_dir / "odd.json").write_text(json.dumps({"subjects": "x"}), encoding="utf-8")
    with pytest.raises(ValueError):
        DataLoader(data_dir).load_grade_sheet("odd.json")


def test_list_grade_sheets(data_dir, tmp_path_factory) -> None:
    assert DataLoader(data_dir).list_grade_sheets() == ["announcements.json", "semester.json"]
    assert DataLoader(tmp_path_factory.mktemp("empty") / "missing").list_grade_sheets() == []

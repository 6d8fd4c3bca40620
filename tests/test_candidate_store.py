import json

import pandas as pd
import pytest

from candidate_search.candidate_store import (
    candidates_from_frame,
    find_candidate,
    load_candidates_snapshot,
)


def test_load_json_snapshot_fills_missing_fields(tmp_path):
    path = tmp_path / "candidates.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "job_looking_for": "Teacher", "exact_location": "Kumasi"},
                {"id": 2, "job_looking_for": "Driver"},
            ]
        ),
        encoding="utf-8",
    )
    records = load_candidates_snapshot(path)

    assert len(records) == 2
    assert records[0].field_text("job_looking_for") == "Teacher"
    assert records[1].exact_location is None
    assert records[1].field_text("exact_location") == ""


def test_load_csv_snapshot_keeps_extra_columns(tmp_path):
    path = tmp_path / "candidates.csv"
    pd.DataFrame(
        [{"id": "a1", "job_looking_for": "Nurse", "phone_model": "X"}]
    ).to_csv(path, index=False)

    records = load_candidates_snapshot(path)
    assert records[0].field_text("phone_model") == "X"
    assert records[0].to_payload()["phone_model"] == "X"


def test_missing_snapshot_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_candidates_snapshot(tmp_path / "nope.json")


def test_unsupported_format_raises(tmp_path):
    path = tmp_path / "candidates.txt"
    path.write_text("teacher", encoding="utf-8")
    with pytest.raises(ValueError):
        load_candidates_snapshot(path)


def test_candidates_from_frame_handles_nan_and_empty():
    df = pd.DataFrame({"id": ["x", "y"], "skills": ["python", float("nan")]})
    records = candidates_from_frame(df)
    assert records[1].skills is None
    assert candidates_from_frame(pd.DataFrame()) == []


def test_find_candidate_compares_as_text():
    records = candidates_from_frame(pd.DataFrame({"id": [7, 8], "job_looking_for": ["Cook", "Chef"]}))
    assert find_candidate(records, "8").field_text("job_looking_for") == "Chef"
    assert find_candidate(records, "99") is None

import argparse
import json

from candidate_search.debug_search import main


def _snapshot(tmp_path):
    path = tmp_path / "candidates.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "full_name": "Ama", "job_looking_for": "Teacher", "exact_location": "Kumasi"},
                {"id": 2, "full_name": "Kojo", "job_looking_for": "Driver", "exact_location": "Accra"},
            ]
        ),
        encoding="utf-8",
    )
    return path


def _args(path, **overrides):
    base = dict(snapshot=str(path), query="teacher in kumasi", top_k=10, min_score=10.0,
                insights=False, log_level="WARNING")
    base.update(overrides)
    return argparse.Namespace(**base)


def test_main_prints_ranked_trail(tmp_path, capsys):
    main(_args(_snapshot(tmp_path)))
    out = capsys.readouterr().out
    assert "Q: teacher in kumasi" in out
    assert "[100]" in out
    assert "Ama | Teacher | Kumasi" in out
    assert "location_bonus" in out


def test_main_prints_insights(tmp_path, capsys):
    main(_args(_snapshot(tmp_path), insights=True))
    out = capsys.readouterr().out
    assert "Total candidates:   2" in out
    assert "Matched candidates: 1" in out

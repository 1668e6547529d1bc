import json

import etl
from fittrack_etl.io import classify_files, load_default_inputs, read_text, write_artifacts
from fittrack_etl.pipeline import parse_file_content

from conftest import HEADER


def test_bundled_default_data_parses():
    json_text, csv_text = load_default_inputs()
    assert json_text is not None and csv_text is not None
    data = parse_file_content(json_text, csv_text)
    assert len(data.metrics) == 5
    assert len(data.workouts) == 3
    assert data.workouts[0].volume == 1480


def test_load_default_inputs_missing_dir(tmp_path):
    assert load_default_inputs(tmp_path) == (None, None)


def test_read_text_strips_bom(tmp_path):
    path = tmp_path / "a.csv"
    path.write_bytes("\ufeffDate\n".encode("utf-8"))
    assert read_text(path) == "Date\n"
    assert read_text(tmp_path / "missing.csv") is None


def test_classify_files_by_extension(tmp_path):
    first = tmp_path / "old.json"
    first.write_text('{"measurements": []}', encoding="utf-8")
    second = tmp_path / "new.JSON"
    second.write_text('{"stats": []}', encoding="utf-8")
    workouts = tmp_path / "strong.csv"
    workouts.write_text(HEADER, encoding="utf-8")
    other = tmp_path / "notes.txt"
    other.write_text("ignore me", encoding="utf-8")

    json_text, csv_text = classify_files([first, workouts, other, second])
    assert json_text == '{"stats": []}'
    assert csv_text == HEADER


def test_write_artifacts(tmp_path, capsys):
    aggregates = {"summary": {"workout_count": 2}, "body_metrics": [{"weight": 80}], "exercises": ["Squat"]}
    write_artifacts(aggregates, out_dir=tmp_path / "derived")
    out = tmp_path / "derived"
    assert json.loads((out / "exercises.json").read_text(encoding="utf-8")) == ["Squat"]
    version = json.loads((out / "data_version.json").read_text(encoding="utf-8"))
    assert version["total_workouts"] == 2
    assert version["total_measurements"] == 1
    assert "Wrote aggregates" in capsys.readouterr().out


def test_cli_build_prints_summary(tmp_path, capsys):
    doc = tmp_path / "body.json"
    doc.write_text(json.dumps({"measurements": [{"date": "2025-01-01", "weight": 80}]}), encoding="utf-8")
    log = tmp_path / "strong.csv"
    log.write_text(HEADER + "\n2025-01-01 10:00:00,Test,60m,Squat,1,100,5,0,0,8,\n", encoding="utf-8")

    etl.main(["build", "--json", str(doc), "--csv", str(log)])
    out = capsys.readouterr().out
    assert "Current weight: 80.0 kg" in out
    assert "Workouts:       1" in out
    assert "Squat: 1 sets, best e1RM 117 kg" in out


def test_cli_exercise_detail(tmp_path, capsys):
    log = tmp_path / "strong.csv"
    log.write_text(HEADER + "\n2025-01-01 10:00:00,Test,60m,Squat,1,100,5,0,0,8,\n", encoding="utf-8")
    etl.main(["exercise", "Squat", "--files", str(log)])
    out = capsys.readouterr().out
    assert "Squat: 1 sets" in out
    assert "100 kg x 5  e1RM 117 kg" in out


def test_cli_reports_empty_dataset(tmp_path, capsys):
    empty = tmp_path / "empty.csv"
    empty.write_text("", encoding="utf-8")
    etl.main(["build", "--csv", str(empty)])
    assert "No data found" in capsys.readouterr().out

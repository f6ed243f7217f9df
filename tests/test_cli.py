import json
import shutil

import pytest

from grading.cli import build_parser, main
from grading.config import DATA_DIR


@pytest.fixture
def export(tmp_path):
    path = tmp_path / "export.json"
    shutil.copy(DATA_DIR / "example_export.json", path)
    return path


def test_summary(export, capsys):
    assert main(["--export", str(export), "summary"]) == 0
    out = capsys.readouterr().out
    assert "Overall GPA" in out
    assert "Calculus I" in out


def test_summary_scale_choice(export, capsys):
    assert main(["--export", str(export), "summary", "--scale", "percentage"]) == 0
    assert "percentage SCALE" in capsys.readouterr().out


def test_course(export, capsys):
    assert main(["--export", str(export), "course", "MATH 101"]) == 0
    assert "Midterm" in capsys.readouterr().out


def test_unknown_course_exits_nonzero(export):
    assert main(["--export", str(export), "course", "Nope"]) == 1


def test_missing_export_exits_nonzero(tmp_path, capsys):
    assert main(["--export", str(tmp_path / "missing.json"), "summary"]) == 1
    out = capsys.readouterr().out
    assert "No export file found" in out
    assert "example_export.json" in out


def test_override_write(export):
    assert main(["--export", str(export), "override", "Calculus I", "91", "--write"]) == 0

    record = json.loads(export.read_text(encoding="utf-8"))["courses"][0]
    assert record["gradeOverride"] == 91
    assert record["gradeOverridePoints"] == 3.7


def test_revert(export):
    assert main(["--export", str(export), "revert", "Art History", "--write"]) == 0

    record = json.loads(export.read_text(encoding="utf-8"))["courses"][5]
    assert "gradeOverride" not in record


def test_predict(export, capsys):
    args = ["--export", str(export), "predict", "Physics I", "--final-weight", "35", "--target", "90"]
    assert main(args) == 0
    assert "95.9%" in capsys.readouterr().out


def test_predict_without_assignments_exits_nonzero(export):
    args = ["--export", str(export), "predict", "Data Structures", "--final-weight", "35", "--target", "90"]
    assert main(args) == 1


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_invalid_json_exits_nonzero(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    assert main(["--export", str(path), "summary"]) == 1
    assert "not valid JSON" in capsys.readouterr().out


def test_non_numeric_year_still_summarizes(export):
    data = json.loads(export.read_text(encoding="utf-8"))
    data["courses"][0]["year"] = "2024-25"
    export.write_text(json.dumps(data), encoding="utf-8")

    assert main(["--export", str(export), "summary"]) == 0

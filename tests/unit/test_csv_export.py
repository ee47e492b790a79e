from __future__ import annotations

import json
from pathlib import Path

from gym_cli.core.models import ProgressionSettings
from gym_cli.core.progress_log import ProgressLog
from gym_cli.core.progression import derive_rows
from gym_cli.exporters.csv_export import row_fields, to_csv, write_csv
from gym_cli.exporters.json_export import rows_payload, write_json

HEADER = "Övning,Set×Reps,Start,Mål v1,Utfört v1,Mål v2,Utfört v2,Mål v3,Utfört v3,Mål v4,Utfört v4"


def test_to_csv_header_and_one_line_per_row(sample_row) -> None:
    csv_text = to_csv([sample_row])
    lines = csv_text.split("\n")
    assert len(lines) == 2
    assert lines[0] == HEADER
    assert lines[1] == "A,1×1,10,11,,12,,13,,14,"


def test_to_csv_uses_lf_without_trailing_newline(sample_row) -> None:
    csv_text = to_csv([sample_row, sample_row])
    assert "\r\n" not in csv_text
    assert not csv_text.endswith("\n")
    assert len(csv_text.split("\n")) == 3


def test_to_csv_replaces_commas_with_semicolons(comma_row) -> None:
    data_line = to_csv([comma_row]).split("\n")[1]
    parts = data_line.split(",")
    assert len(parts) == 11
    assert parts[0] == "B; C"
    assert parts[1] == "1;2×3"
    assert parts[2] == "10;5"
    assert parts[3] == "1;1"


def test_to_csv_empty_rows_gives_header_only() -> None:
    assert to_csv([]) == HEADER


def test_to_csv_empty_targets_serialize_as_blank(catalog) -> None:
    log = ProgressLog([exercise.id for exercise in catalog])
    rows = derive_rows(catalog, log, ProgressionSettings())
    lines = to_csv(rows).split("\n")
    assert len(lines) == len(catalog) + 1
    assert lines[1] == "Bänkpress,4×8–10,,8,,9,,10,,10,"
    assert lines[-1] == "Plankan,3×30–45 sek,,,,,,,,,"


def test_row_fields_interleave_targets_and_actuals(sample_row) -> None:
    assert row_fields(sample_row) == ["A", "1×1", "10", "11", "", "12", "", "13", "", "14", ""]


def test_write_csv_writes_utf8_lf(tmp_path: Path, comma_row) -> None:
    path = write_csv(tmp_path / "out" / "gym.csv", [comma_row])
    raw = path.read_bytes()
    assert b"\r\n" not in raw
    assert raw.decode("utf-8").startswith("Övning,")


def test_json_export_payload(tmp_path: Path, sample_row) -> None:
    payload = rows_payload([sample_row], ProgressionSettings(reps_per_week=2, seconds_per_week=10))
    path = write_json(tmp_path / "rows.json", payload)
    loaded = json.loads(path.read_text(encoding="utf-8"))
    assert loaded["settings"] == {"reps_per_week": 2, "seconds_per_week": 10}
    assert loaded["rows"][0]["targets"] == ["11", "12", "13", "14"]
    assert loaded["rows"][0]["id"] == "a"

import json
from pathlib import Path

import pytest

from gym_cli.core.catalog import CatalogError, default_catalog, find_exercise, load_catalog


def test_default_catalog_matches_program() -> None:
    catalog = default_catalog()
    assert [exercise.id for exercise in catalog] == [
        "bench",
        "lat",
        "db_sh_press",
        "row",
        "incl_db",
        "curl",
        "pushdown",
        "plank",
    ]
    assert catalog[-1].is_timed
    assert not catalog[0].is_timed


def test_load_catalog_without_path_returns_default() -> None:
    assert load_catalog(None) == default_catalog()


def test_load_catalog_from_yaml(write_temp_text) -> None:
    path = write_temp_text(
        "catalog.yaml",
        """
- id: dips
  name: Dips
  scheme: 3×6–8
- id: hang
  name: Dead hang
  scheme: 3×20–40 sek
  unit: sek
""",
    )
    catalog = load_catalog(path)
    assert [exercise.id for exercise in catalog] == ["dips", "hang"]
    assert catalog[0].unit == "kg"
    assert catalog[1].unit == "sek"


def test_load_catalog_duplicate_ids_raise(write_temp_json) -> None:
    path = write_temp_json("catalog.json", [{"id": "a", "name": "A"}, {"id": "a", "name": "B"}])
    with pytest.raises(CatalogError, match="Duplicate"):
        load_catalog(path)


def test_load_catalog_missing_name_raises(write_temp_json) -> None:
    path = write_temp_json("catalog.json", [{"id": "a"}])
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_load_catalog_unknown_unit_raises(write_temp_json) -> None:
    path = write_temp_json("catalog.json", [{"id": "a", "name": "A", "unit": "lbs"}])
    with pytest.raises(CatalogError, match="unknown unit"):
        load_catalog(path)


def test_load_catalog_unreadable_file_raises(tmp_path: Path) -> None:
    with pytest.raises(CatalogError):
        load_catalog(tmp_path / "missing.yaml")
    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(broken)


def test_load_catalog_empty_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text(json.dumps([]), encoding="utf-8")
    with pytest.raises(CatalogError, match="no exercises"):
        load_catalog(path)


def test_find_exercise() -> None:
    catalog = default_catalog()
    assert find_exercise(catalog, "curl").name == "Bicepscurl"
    assert find_exercise(catalog, "squat") is None

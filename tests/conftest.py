from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest
from typer.testing import CliRunner

from gym_cli.core.catalog import default_catalog
from gym_cli.core.models import DerivedRow, ExerciseDefinition
from gym_cli.core.storage import MemoryStore


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep config, state and exports inside tmp_path."""
    home = tmp_path / "home"
    monkeypatch.setenv("GYM_CONFIG_FILE", str(home / "config.toml"))
    monkeypatch.setenv("GYM_DATA_DIR", str(home / "data"))
    monkeypatch.setenv("GYM_OUTPUT_DIR", str(tmp_path / "exports"))
    monkeypatch.delenv("GYM_STATE_FILE", raising=False)
    monkeypatch.delenv("GYM_SYSTEM_DARK", raising=False)
    return home


@pytest.fixture()
def state_file(isolated_env: Path) -> Path:
    return isolated_env / "data" / "state.json"


@pytest.fixture()
def catalog() -> List[ExerciseDefinition]:
    return default_catalog()


@pytest.fixture()
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def sample_row() -> DerivedRow:
    return DerivedRow(
        id="a",
        name="A",
        scheme="1×1",
        unit="kg",
        start="10",
        targets=("11", "12", "13", "14"),
        actuals=("", "", "", ""),
    )


@pytest.fixture()
def comma_row() -> DerivedRow:
    return DerivedRow(
        id="b",
        name="B, C",
        scheme="1,2×3",
        unit="kg",
        start="10,5",
        targets=("1,1", "2,2", "3,3", "4,4"),
        actuals=("", "", "", ""),
    )


@pytest.fixture()
def write_temp_json(tmp_path: Path):
    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def write_temp_text(tmp_path: Path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content.strip() + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def stored_state(state_file: Path):
    def _store(items: Dict[str, str]) -> Path:
        state_file.parent.mkdir(parents=True, exist_ok=True)
        state_file.write_text(json.dumps(items), encoding="utf-8")
        return state_file

    return _store

import json
import logging

from gym_cli.core.models import ProgressionSettings
from gym_cli.core.state import (
    AppState,
    load_app_state,
    load_progress_log,
    save_display_preferences,
    save_progress_log,
)
from gym_cli.core.storage import MemoryStore


def test_load_progress_log_without_saved_state(catalog, memory_store) -> None:
    log = load_progress_log(memory_store, catalog)
    for exercise in catalog:
        assert log.get(exercise.id).to_dict() == {"start": "", "actuals": ["", "", "", ""]}


def test_load_progress_log_corrupt_json_falls_back(catalog, caplog) -> None:
    caplog.set_level(logging.WARNING)
    store = MemoryStore({"progressLog": "{oops"})
    log = load_progress_log(store, catalog)
    assert log.get("bench").start == ""
    assert "corrupt" in caplog.text


def test_save_and_load_progress_log(catalog, memory_store) -> None:
    log = load_progress_log(memory_store, catalog)
    log.set_start("bench", "60")
    log.set_actual("plank", 2, "40")
    save_progress_log(memory_store, log)

    saved = json.loads(memory_store.get_item("progressLog"))
    assert saved["bench"] == {"start": "60", "actuals": ["", "", "", ""]}

    reloaded = load_progress_log(memory_store, catalog)
    assert reloaded.get("plank").actuals == ["", "", "40", ""]


def test_load_app_state_reads_display_preferences(catalog) -> None:
    store = MemoryStore({"theme": "dark", "compactMode": "on"})
    app = load_app_state(store, catalog, ProgressionSettings(reps_per_week=2))
    assert app.theme == "dark"
    assert app.compact_mode == "on"
    assert app.settings.reps_per_week == 2


def test_load_app_state_unknown_preferences_use_defaults(catalog) -> None:
    store = MemoryStore({"theme": "neon", "compactMode": "maybe"})
    app = load_app_state(store, catalog, ProgressionSettings())
    assert app.theme == "system"
    assert app.compact_mode == "auto"


def test_save_display_preferences(catalog, memory_store) -> None:
    app = AppState(log=load_progress_log(memory_store, catalog), theme="light", compact_mode="off")
    save_display_preferences(memory_store, app)
    assert memory_store.items == {"theme": "light", "compactMode": "off"}

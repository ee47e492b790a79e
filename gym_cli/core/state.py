"""Application state and runtime state container for CLI context."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from rich.console import Console

from gym_cli.core.constants import (
    COMPACT_KEY,
    DEFAULT_COMPACT_MODE,
    DEFAULT_THEME,
    PROGRESS_LOG_KEY,
    THEME_KEY,
)
from gym_cli.core.display import normalize_compact_mode, normalize_theme
from gym_cli.core.models import ExerciseDefinition, InputSettings, ProgressionSettings
from gym_cli.core.progress_log import ProgressLog
from gym_cli.core.storage import KeyValueStore

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Everything the presentation layer reads and edits."""

    log: ProgressLog
    settings: ProgressionSettings = field(default_factory=ProgressionSettings)
    theme: str = DEFAULT_THEME
    compact_mode: str = DEFAULT_COMPACT_MODE


def load_progress_log(store: KeyValueStore, catalog: List[ExerciseDefinition]) -> ProgressLog:
    """Read the progress log; missing or corrupt data gives empty defaults."""
    exercise_ids = [exercise.id for exercise in catalog]
    saved = store.get_item(PROGRESS_LOG_KEY)
    if not saved:
        return ProgressLog(exercise_ids)
    try:
        payload = json.loads(saved)
    except json.JSONDecodeError as exc:
        logger.warning("Stored progress log is corrupt, starting fresh: %s", exc)
        return ProgressLog(exercise_ids)
    return ProgressLog.from_dict(exercise_ids, payload)


def load_app_state(
    store: KeyValueStore,
    catalog: List[ExerciseDefinition],
    settings: ProgressionSettings,
) -> AppState:
    return AppState(
        log=load_progress_log(store, catalog),
        settings=settings,
        theme=normalize_theme(store.get_item(THEME_KEY)),
        compact_mode=normalize_compact_mode(store.get_item(COMPACT_KEY)),
    )


def save_progress_log(store: KeyValueStore, log: ProgressLog) -> None:
    store.set_item(PROGRESS_LOG_KEY, json.dumps(log.to_dict(), ensure_ascii=False))


def save_display_preferences(store: KeyValueStore, app: AppState) -> None:
    store.set_item(THEME_KEY, app.theme)
    store.set_item(COMPACT_KEY, app.compact_mode)


@dataclass
class CLIState:
    """CLI runtime options and loaded configuration."""

    json_output: bool
    plain_output: bool
    verbose: bool
    quiet: bool
    config_path: Path
    config: Dict[str, Any]
    console: Console
    store: KeyValueStore
    catalog: List[ExerciseDefinition]
    settings: ProgressionSettings
    system_prefers_dark: bool = False
    input_settings: InputSettings = field(default_factory=InputSettings)
    small_screen_columns: int = 100

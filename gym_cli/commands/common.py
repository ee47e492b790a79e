"""Shared command helpers."""

from __future__ import annotations

import json
from typing import Any, Dict, List

import typer

from gym_cli.core.catalog import find_exercise
from gym_cli.core.display import is_compact, is_dark
from gym_cli.core.models import DerivedRow, ExerciseDefinition
from gym_cli.core.progression import derive_rows
from gym_cli.core.state import AppState, CLIState, load_app_state


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))
        return
    state.console.print_json(data=payload)


def load_app(state: CLIState) -> AppState:
    return load_app_state(state.store, state.catalog, state.settings)


def current_rows(state: CLIState, app: AppState) -> List[DerivedRow]:
    return derive_rows(state.catalog, app.log, app.settings)


def require_exercise(state: CLIState, exercise_id: str) -> ExerciseDefinition:
    """Look up exercise id or fail with the list of known ids."""
    exercise = find_exercise(state.catalog, exercise_id)
    if exercise is None:
        known = ", ".join(item.id for item in state.catalog)
        raise typer.BadParameter(f"Unknown exercise '{exercise_id}'. Known exercises: {known}")
    return exercise


def display_flags(state: CLIState, app: AppState) -> Dict[str, bool]:
    """Resolve effective dark/compact flags for the current console."""
    return {
        "dark": is_dark(app.theme, state.system_prefers_dark),
        "compact": is_compact(app.compact_mode, state.console.width < state.small_screen_columns),
    }

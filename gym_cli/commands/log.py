"""Commands that edit the progress log."""

from __future__ import annotations

import logging

import typer

from gym_cli.commands.common import get_state, load_app, print_json_payload, require_exercise
from gym_cli.core.constants import UNIT_WEIGHT, WEEKS
from gym_cli.core.models import ExerciseDefinition
from gym_cli.core.state import CLIState, save_progress_log
from gym_cli.utils.formatting import normalize_weight_input

logger = logging.getLogger(__name__)


def _normalize_value(state: CLIState, exercise: ExerciseDefinition, value: str) -> str:
    settings = state.input_settings
    if exercise.unit != UNIT_WEIGHT or not settings.round_weights:
        return value
    normalized = normalize_weight_input(value, settings.weight_step)
    if normalized != value:
        logger.debug("Rounded %s entry %r to %r", exercise.id, value, normalized)
    return normalized


def _report(state: CLIState, payload: dict, message: str) -> None:
    if state.json_output:
        print_json_payload(state, payload)
        return
    if state.plain_output:
        for key, value in payload.items():
            typer.echo(f"{key}\t{value}")
        return
    state.console.print(message)


def start_command(
    ctx: typer.Context,
    exercise_id: str = typer.Argument(..., metavar="EXERCISE", help="Exercise id, see 'gym exercises'"),
    value: str = typer.Argument(..., help="Start weight (kg) or seconds; empty string clears it"),
) -> None:
    """Set the start value for an exercise."""
    state = get_state(ctx)
    exercise = require_exercise(state, exercise_id)
    app = load_app(state)

    stored = _normalize_value(state, exercise, value)
    app.log.set_start(exercise.id, stored)
    save_progress_log(state.store, app.log)

    _report(
        state,
        {"status": "saved", "exercise": exercise.id, "start": stored},
        f"{exercise.name}: start = {stored or '–'} {exercise.unit}",
    )


def log_command(
    ctx: typer.Context,
    exercise_id: str = typer.Argument(..., metavar="EXERCISE", help="Exercise id, see 'gym exercises'"),
    week: int = typer.Argument(..., min=1, max=WEEKS, help="Week number 1-4"),
    value: str = typer.Argument(..., help="Actual result; empty string clears it"),
) -> None:
    """Log the actual result for one week."""
    state = get_state(ctx)
    exercise = require_exercise(state, exercise_id)
    app = load_app(state)

    stored = _normalize_value(state, exercise, value)
    app.log.set_actual(exercise.id, week - 1, stored)
    save_progress_log(state.store, app.log)

    _report(
        state,
        {"status": "saved", "exercise": exercise.id, "week": week, "actual": stored},
        f"{exercise.name}: week {week} = {stored or '–'} {exercise.unit}",
    )


def reset_command(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Clear all start values and logged results."""
    state = get_state(ctx)
    if not yes and not typer.confirm("Clear all start values and logged results?"):
        raise typer.Exit(code=1)

    app = load_app(state)
    app.log.reset_all()
    save_progress_log(state.store, app.log)

    _report(
        state,
        {"status": "reset", "exercises": len(state.catalog)},
        f"Cleared progress for {len(state.catalog)} exercises",
    )

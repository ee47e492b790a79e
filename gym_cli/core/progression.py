"""Weekly target computation and row derivation."""

from __future__ import annotations

from typing import Any, List, Sequence

from gym_cli.core.constants import EMPTY, UNIT_TIME, WEEKS
from gym_cli.core.models import DerivedRow, ExerciseDefinition, ProgressionSettings, Target
from gym_cli.core.progress_log import ProgressLog
from gym_cli.utils.formatting import round_half_up
from gym_cli.utils.parsing import parse_number, scheme_spec


def clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


def weekly_targets(
    start: Any,
    unit: str,
    min_reps: int,
    max_reps: int,
    reps_per_week: int,
    seconds_per_week: int,
) -> List[Target]:
    """Compute the 4 weekly targets.

    Weight exercises climb ``reps_per_week`` from ``min_reps`` and stay
    pinned at ``max_reps``; the start value is not used. Timed exercises
    add ``seconds_per_week`` to a numeric start and are empty without one.
    """
    if unit == UNIT_TIME:
        base = parse_number(start)
        if base is None:
            return [EMPTY] * WEEKS
        return [round_half_up(base + week * seconds_per_week) for week in range(WEEKS)]

    return [clamp(min_reps + week * reps_per_week, min_reps, max_reps) for week in range(WEEKS)]


def derive_row(
    exercise: ExerciseDefinition,
    log: ProgressLog,
    settings: ProgressionSettings,
) -> DerivedRow:
    entry = log.get(exercise.id)
    spec = scheme_spec(exercise.scheme)
    targets = weekly_targets(
        entry.start,
        exercise.unit,
        spec.min_reps,
        spec.max_reps,
        settings.reps_per_week,
        settings.seconds_per_week,
    )
    return DerivedRow(
        id=exercise.id,
        name=exercise.name,
        scheme=exercise.scheme,
        unit=exercise.unit,
        start=entry.start,
        targets=tuple(targets),
        actuals=tuple(entry.actuals),
    )


def derive_rows(
    catalog: Sequence[ExerciseDefinition],
    log: ProgressLog,
    settings: ProgressionSettings,
) -> List[DerivedRow]:
    """Derive display rows in catalog order."""
    return [derive_row(exercise, log, settings) for exercise in catalog]

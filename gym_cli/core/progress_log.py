"""Persisted start values and weekly actuals per exercise."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from gym_cli.core.constants import EMPTY, WEEKS
from gym_cli.core.models import ExerciseLog


def _as_text(value: Any) -> str:
    if value is None:
        return EMPTY
    if isinstance(value, str):
        return value
    return str(value)


def _normalize_entry(raw: Any) -> ExerciseLog:
    if not isinstance(raw, dict):
        return ExerciseLog()
    actuals_raw = raw.get("actuals")
    actuals: List[str] = []
    if isinstance(actuals_raw, list):
        actuals = [_as_text(item) for item in actuals_raw[:WEEKS]]
    actuals.extend([EMPTY] * (WEEKS - len(actuals)))
    return ExerciseLog(start=_as_text(raw.get("start")), actuals=actuals)


class ProgressLog:
    """Mapping of exercise id to ExerciseLog.

    Values are stored verbatim; numeric interpretation happens when rows
    are derived. Unknown ids read as empty entries.
    """

    def __init__(
        self,
        exercise_ids: Iterable[str],
        entries: Optional[Dict[str, ExerciseLog]] = None,
    ) -> None:
        self.exercise_ids = list(exercise_ids)
        self._entries: Dict[str, ExerciseLog] = {}
        for exercise_id in self.exercise_ids:
            self._entries[exercise_id] = ExerciseLog()
        if entries:
            self._entries.update(entries)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._entries

    def get(self, exercise_id: str) -> ExerciseLog:
        entry = self._entries.get(exercise_id)
        if entry is None:
            return ExerciseLog()
        return entry

    def _entry_for_update(self, exercise_id: str) -> ExerciseLog:
        entry = self._entries.get(exercise_id)
        if entry is None:
            entry = ExerciseLog()
            self._entries[exercise_id] = entry
        return entry

    def set_start(self, exercise_id: str, value: str) -> None:
        self._entry_for_update(exercise_id).start = _as_text(value)

    def set_actual(self, exercise_id: str, week_index: int, value: str) -> None:
        if not 0 <= week_index < WEEKS:
            raise ValueError(f"week_index must be between 0 and {WEEKS - 1}, got {week_index}")
        self._entry_for_update(exercise_id).actuals[week_index] = _as_text(value)

    def reset_all(self) -> None:
        self._entries = {exercise_id: ExerciseLog() for exercise_id in self.exercise_ids}

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {exercise_id: entry.to_dict() for exercise_id, entry in self._entries.items()}

    @classmethod
    def from_dict(cls, exercise_ids: Iterable[str], payload: Any) -> "ProgressLog":
        """Build log from decoded JSON, normalizing malformed entries."""
        entries: Dict[str, ExerciseLog] = {}
        if isinstance(payload, dict):
            for exercise_id, raw in payload.items():
                entries[str(exercise_id)] = _normalize_entry(raw)
        return cls(exercise_ids, entries)

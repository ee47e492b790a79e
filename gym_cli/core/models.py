"""Lightweight data models used across commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

from gym_cli.core.constants import (
    DEFAULT_REPS_PER_WEEK,
    DEFAULT_SECONDS_PER_WEEK,
    EMPTY,
    UNIT_TIME,
    UNIT_WEIGHT,
    WEEKS,
)

Target = Union[int, str]


@dataclass(frozen=True)
class ExerciseDefinition:
    """Catalog entry for one exercise."""

    id: str
    name: str
    scheme: str
    unit: str = UNIT_WEIGHT

    @property
    def is_timed(self) -> bool:
        return self.unit == UNIT_TIME


@dataclass(frozen=True)
class SchemeSpec:
    """Structured set count and rep range."""

    sets: int
    min_reps: int
    max_reps: int


@dataclass(frozen=True)
class SchemeParse:
    """Parsed scheme plus the fields that fell back to defaults."""

    spec: SchemeSpec
    defaulted_fields: Tuple[str, ...] = ()

    @property
    def defaulted(self) -> bool:
        return bool(self.defaulted_fields)


def _empty_actuals() -> List[str]:
    return [EMPTY] * WEEKS


@dataclass
class ExerciseLog:
    """Logged start value and weekly actuals for one exercise."""

    start: str = EMPTY
    actuals: List[str] = field(default_factory=_empty_actuals)

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start, "actuals": list(self.actuals)}


@dataclass(frozen=True)
class ProgressionSettings:
    """Weekly progression rates shared by all exercises of a unit kind."""

    reps_per_week: int = DEFAULT_REPS_PER_WEEK
    seconds_per_week: int = DEFAULT_SECONDS_PER_WEEK


@dataclass(frozen=True)
class InputSettings:
    """How weight entries are normalized before they are stored."""

    round_weights: bool = True
    weight_step: float = 0.5


@dataclass(frozen=True)
class DerivedRow:
    """Display/export row computed from catalog, log and settings."""

    id: str
    name: str
    scheme: str
    unit: str
    start: str
    targets: Tuple[Target, ...]
    actuals: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "scheme": self.scheme,
            "unit": self.unit,
            "start": self.start,
            "targets": list(self.targets),
            "actuals": list(self.actuals),
        }

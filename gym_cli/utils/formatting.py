"""Rounding and formatting helpers used by exports and console output."""

from __future__ import annotations

import math
from typing import Any, Union

from gym_cli.core.constants import EMPTY, TARGET_LABELS
from gym_cli.utils.parsing import parse_number


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))


def round_to(value: Any, step: float = 0.5) -> Union[float, str]:
    """Round value to nearest step; EMPTY for missing or non-numeric input."""
    number = parse_number(value)
    if number is None:
        return EMPTY
    return round_half_up(number / step) * step


def format_number(value: Union[int, float]) -> str:
    """Format number without a trailing '.0' for integral values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_cell(value: Any) -> str:
    """Stringify a table/export cell; None becomes empty."""
    if value is None:
        return EMPTY
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


def format_target(value: Any, unit: str) -> str:
    """Format weekly target with its label, or an en-dash when unset."""
    if value is None or value == EMPTY:
        return "–"
    return f"{format_cell(value)} {TARGET_LABELS.get(unit, unit)}"


def normalize_weight_input(value: str, step: float = 0.5) -> str:
    """Round a weight entry to step; non-numeric entries pass through."""
    rounded = round_to(value, step)
    if rounded == EMPTY:
        return value
    return format_number(rounded)

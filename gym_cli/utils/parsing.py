"""Parsing helpers for schemes, numeric input and catalog files."""

from __future__ import annotations

import json
import math
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from gym_cli.core.constants import (
    DEFAULT_MAX_REPS,
    DEFAULT_REPS,
    DEFAULT_SETS,
    RANGE_DELIMITERS,
    SCHEME_SEPARATOR,
)
from gym_cli.core.models import SchemeParse, SchemeSpec

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_leading_int(value: Optional[str]) -> Optional[int]:
    """Parse leading integer like '45 sek' -> 45, None when absent."""
    if not value:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def _positive(value: Optional[str]) -> Optional[int]:
    parsed = parse_leading_int(value)
    if parsed is None or parsed <= 0:
        return None
    return parsed


def parse_scheme(text: Optional[str]) -> SchemeParse:
    """Parse scheme text like '4×8–10' or '3×12'.

    Never raises. Unparsable parts fall back to defaults and are listed in
    ``defaulted_fields``.
    """
    if not text:
        return SchemeParse(
            spec=SchemeSpec(sets=DEFAULT_SETS, min_reps=DEFAULT_REPS, max_reps=DEFAULT_MAX_REPS),
            defaulted_fields=("sets", "min_reps", "max_reps"),
        )

    defaulted: List[str] = []
    parts = text.split(SCHEME_SEPARATOR)

    sets = _positive(parts[0])
    if sets is None:
        sets = DEFAULT_SETS
        defaulted.append("sets")

    reps_part = parts[1].strip() if len(parts) > 1 else ""
    delimiter = next((mark for mark in RANGE_DELIMITERS if mark in reps_part), None)

    if delimiter:
        pieces = [piece.strip() for piece in reps_part.split(delimiter)]
        min_reps = _positive(pieces[0])
        if min_reps is None:
            min_reps = DEFAULT_REPS
            defaulted.append("min_reps")
        max_reps = _positive(pieces[1])
        if max_reps is None or max_reps < min_reps:
            max_reps = min_reps
            defaulted.append("max_reps")
    else:
        fixed = _positive(reps_part)
        if fixed is None:
            fixed = DEFAULT_REPS
            defaulted.extend(["min_reps", "max_reps"])
        min_reps = max_reps = fixed

    return SchemeParse(
        spec=SchemeSpec(sets=sets, min_reps=min_reps, max_reps=max_reps),
        defaulted_fields=tuple(defaulted),
    )


def scheme_spec(text: Optional[str]) -> SchemeSpec:
    """Parse scheme text and return only the spec."""
    return parse_scheme(text).spec


def parse_number(value: Any) -> Optional[float]:
    """Parse user-entered numeric value; None for empty or invalid input."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        raw = str(value).strip()
        if not _DECIMAL.fullmatch(raw):
            return None
        number = float(raw)
    if not math.isfinite(number):
        return None
    return number


def load_structured_file(file_path: Path) -> List[Dict[str, Any]]:
    """Load object(s) from a YAML or JSON file."""
    text = file_path.read_text(encoding="utf-8")
    raw_data: Any
    if file_path.suffix.lower() in {".yaml", ".yml"}:
        raw_data = yaml.safe_load(text)
    else:
        raw_data = json.loads(text)

    if isinstance(raw_data, dict):
        exercises = raw_data.get("exercises")
        if isinstance(exercises, list):
            raw_data = exercises
        else:
            return [raw_data]
    if isinstance(raw_data, list):
        return [item for item in raw_data if isinstance(item, dict)]
    return []

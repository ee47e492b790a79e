"""Exercise catalog: built-in program and optional catalog files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from gym_cli.core.constants import DEFAULT_EXERCISES, UNIT_WEIGHT, UNITS
from gym_cli.core.models import ExerciseDefinition
from gym_cli.utils.parsing import load_structured_file


class CatalogError(RuntimeError):
    """Raised when a catalog file cannot be used."""


def _build(entries: Sequence[Dict[str, Any]], source: str) -> List[ExerciseDefinition]:
    catalog: List[ExerciseDefinition] = []
    seen = set()
    for index, entry in enumerate(entries, 1):
        exercise_id = str(entry.get("id") or "").strip()
        name = str(entry.get("name") or "").strip()
        if not exercise_id or not name:
            raise CatalogError(f"Exercise #{index} in {source} needs both 'id' and 'name'")
        if exercise_id in seen:
            raise CatalogError(f"Duplicate exercise id '{exercise_id}' in {source}")
        unit = str(entry.get("unit") or UNIT_WEIGHT)
        if unit not in UNITS:
            raise CatalogError(
                f"Exercise '{exercise_id}' in {source} has unknown unit '{unit}' "
                f"(expected one of: {', '.join(UNITS)})"
            )
        seen.add(exercise_id)
        catalog.append(
            ExerciseDefinition(
                id=exercise_id,
                name=name,
                scheme=str(entry.get("scheme") or ""),
                unit=unit,
            )
        )
    return catalog


def default_catalog() -> List[ExerciseDefinition]:
    return _build(DEFAULT_EXERCISES, "built-in catalog")


def load_catalog(path: Optional[Path] = None) -> List[ExerciseDefinition]:
    """Load catalog from YAML/JSON file, or the built-in program."""
    if path is None:
        return default_catalog()
    try:
        entries = load_structured_file(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise CatalogError(f"Failed to read catalog file {path}: {exc}") from exc
    if not entries:
        raise CatalogError(f"Catalog file {path} contains no exercises")
    return _build(entries, str(path))


def find_exercise(catalog: Sequence[ExerciseDefinition], exercise_id: str) -> Optional[ExerciseDefinition]:
    for exercise in catalog:
        if exercise.id == exercise_id:
            return exercise
    return None

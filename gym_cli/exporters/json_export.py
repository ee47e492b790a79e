"""JSON export helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Sequence

from gym_cli.core.models import DerivedRow, ProgressionSettings


def rows_payload(rows: Sequence[DerivedRow], settings: ProgressionSettings) -> Dict[str, Any]:
    """Build the JSON document for a set of derived rows."""
    return {
        "settings": {
            "reps_per_week": settings.reps_per_week,
            "seconds_per_week": settings.seconds_per_week,
        },
        "rows": [row.to_dict() for row in rows],
    }


def write_json(path: Path, payload: Any) -> Path:
    """Write payload as pretty JSON and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path

"""CSV export of derived progression rows."""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Sequence

from gym_cli.core.constants import CSV_HEADER, WEEKS
from gym_cli.core.models import DerivedRow
from gym_cli.utils.formatting import format_cell


def _escape(value: Any) -> str:
    # No quoting: commas inside a cell become semicolons.
    return format_cell(value).replace(",", ";")


def row_fields(row: DerivedRow) -> List[Any]:
    """Cells in header order: name, scheme, start, then target/actual per week."""
    fields: List[Any] = [row.name, row.scheme, row.start]
    for week in range(WEEKS):
        fields.append(row.targets[week] if week < len(row.targets) else None)
        fields.append(row.actuals[week] if week < len(row.actuals) else None)
    return fields


def to_csv(rows: Sequence[DerivedRow]) -> str:
    """Serialize rows as LF-separated CSV text without trailing newline."""
    lines = [",".join(CSV_HEADER)]
    for row in rows:
        lines.append(",".join(_escape(value) for value in row_fields(row)))
    return "\n".join(lines)


def write_csv(path: Path, rows: Sequence[DerivedRow]) -> Path:
    """Write CSV as UTF-8 without newline translation and return path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(to_csv(rows))
    return path

"""Progression table and catalog listing commands."""

from __future__ import annotations

from typing import List

import typer
from rich import box
from rich.markup import escape
from rich.table import Table

from gym_cli.commands.common import (
    current_rows,
    display_flags,
    get_state,
    load_app,
    print_json_payload,
)
from gym_cli.core.constants import CSV_HEADER, WEEKS
from gym_cli.core.models import DerivedRow, ProgressionSettings
from gym_cli.exporters.json_export import rows_payload
from gym_cli.utils.formatting import format_cell, format_target
from gym_cli.utils.parsing import parse_scheme

_LIGHT_STYLES = {"header": "bold black on grey85", "muted": "grey42", "target": "black"}
_DARK_STYLES = {"header": "bold white on grey23", "muted": "grey62", "target": "bright_white"}


def _build_table(rows: List[DerivedRow], settings: ProgressionSettings, dark: bool, compact: bool) -> Table:
    styles = _DARK_STYLES if dark else _LIGHT_STYLES
    table = Table(
        title="Överkroppsprogram – 4 veckors progression",
        caption=(
            f"+{settings.reps_per_week} reps/vecka (håll vikten konstant) · "
            f"+{settings.seconds_per_week} sek/vecka"
        ),
        header_style=styles["header"],
        box=box.SIMPLE if compact else box.ROUNDED,
        padding=(0, 0) if compact else (0, 1),
        show_edge=not compact,
    )
    for index, label in enumerate(CSV_HEADER):
        table.add_column(label, style=styles["muted"] if index == 1 else None, no_wrap=index > 1)

    for row in rows:
        start = f"{row.start} {row.unit}" if row.start else "–"
        cells = [escape(row.name), escape(row.scheme), escape(start)]
        for week in range(WEEKS):
            cells.append(f"[{styles['target']}]{format_target(row.targets[week], row.unit)}[/]")
            cells.append(escape(row.actuals[week]) or "–")
        table.add_row(*cells)
    return table


def show_command(ctx: typer.Context) -> None:
    """Show start values, weekly targets and logged results."""
    state = get_state(ctx)
    app = load_app(state)
    rows = current_rows(state, app)

    if state.json_output:
        print_json_payload(state, rows_payload(rows, app.settings))
        return

    if state.plain_output:
        typer.echo("\t".join(["id"] + CSV_HEADER))
        for row in rows:
            cells = [row.id, row.name, row.scheme, row.start]
            for week in range(WEEKS):
                cells.append(format_cell(row.targets[week]))
                cells.append(row.actuals[week])
            typer.echo("\t".join(cells))
        return

    flags = display_flags(state, app)
    state.console.print(_build_table(rows, app.settings, dark=flags["dark"], compact=flags["compact"]))


def exercises_command(ctx: typer.Context) -> None:
    """List catalog exercises and their parsed schemes."""
    state = get_state(ctx)
    entries = []
    for exercise in state.catalog:
        spec = parse_scheme(exercise.scheme).spec
        entries.append(
            {
                "id": exercise.id,
                "name": exercise.name,
                "scheme": exercise.scheme,
                "unit": exercise.unit,
                "sets": spec.sets,
                "min_reps": spec.min_reps,
                "max_reps": spec.max_reps,
            }
        )

    if state.json_output:
        print_json_payload(state, {"exercises": entries})
        return

    if state.plain_output:
        for entry in entries:
            typer.echo(
                f"{entry['id']}\t{entry['name']}\t{entry['scheme']}\t{entry['unit']}\t"
                f"{entry['sets']}\t{entry['min_reps']}\t{entry['max_reps']}"
            )
        return

    table = Table(title=f"Exercises ({len(entries)} total)")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Scheme")
    table.add_column("Unit")
    table.add_column("Sets")
    table.add_column("Range")
    for entry in entries:
        table.add_row(
            entry["id"],
            entry["name"],
            entry["scheme"],
            entry["unit"],
            str(entry["sets"]),
            f"{entry['min_reps']}–{entry['max_reps']}",
        )
    state.console.print(table)


def scheme_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Scheme text, e.g. '4×8–10'"),
) -> None:
    """Parse a set×reps scheme and report which parts fell back to defaults."""
    state = get_state(ctx)
    parsed = parse_scheme(text)
    payload = {
        "scheme": text,
        "sets": parsed.spec.sets,
        "min_reps": parsed.spec.min_reps,
        "max_reps": parsed.spec.max_reps,
        "defaulted": list(parsed.defaulted_fields),
    }

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        for key in ("sets", "min_reps", "max_reps"):
            typer.echo(f"{key}\t{payload[key]}")
        typer.echo(f"defaulted\t{','.join(payload['defaulted'])}")
        return

    state.console.print(
        f"{parsed.spec.sets} sets of {parsed.spec.min_reps}–{parsed.spec.max_reps}"
    )
    if parsed.defaulted:
        state.console.print(f"Defaulted: {', '.join(parsed.defaulted_fields)}")

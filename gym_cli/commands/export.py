"""Export progression rows to external formats."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import typer

from gym_cli.commands.common import current_rows, get_state, load_app, print_json_payload
from gym_cli.core.config import resolve_output_dir
from gym_cli.core.constants import CSV_FILENAME, CSV_MIME_TYPE
from gym_cli.exporters.csv_export import to_csv, write_csv
from gym_cli.exporters.json_export import rows_payload, write_json


def export_command(
    ctx: typer.Context,
    output_format: str = typer.Option("csv", "--format", help="Export format: csv|json"),
    output_dir: Optional[Path] = typer.Option(None, help="Output directory"),
    output_file: Optional[Path] = typer.Option(None, help="Output file (overrides --output-dir)"),
    stdout: bool = typer.Option(False, "--stdout", help="Write CSV/JSON to stdout instead of a file"),
) -> None:
    """Export start values, targets and logged results as CSV or JSON."""
    state = get_state(ctx)

    if output_format not in {"csv", "json"}:
        raise typer.BadParameter("--format must be csv|json")

    app = load_app(state)
    rows = current_rows(state, app)

    if stdout:
        if output_format == "csv":
            typer.echo(to_csv(rows), nl=False)
        else:
            print_json_payload(state, rows_payload(rows, app.settings))
        return

    if output_file is not None:
        path = output_file.expanduser().resolve()
    else:
        out_dir = resolve_output_dir(state.config, explicit=output_dir)
        filename = str(state.config.get("export", {}).get("filename") or CSV_FILENAME)
        if output_format == "json":
            filename = f"{Path(filename).stem}.json"
        path = out_dir / filename

    result: Dict[str, object]
    if output_format == "csv":
        write_csv(path, rows)
        result = {
            "status": "exported",
            "format": "csv",
            "mime_type": CSV_MIME_TYPE,
            "path": str(path),
            "count": len(rows),
        }
    else:
        write_json(path, rows_payload(rows, app.settings))
        result = {
            "status": "exported",
            "format": "json",
            "mime_type": "application/json",
            "path": str(path),
            "count": len(rows),
        }

    if state.json_output:
        print_json_payload(state, result)
        return

    if state.plain_output:
        for key in ("status", "format", "path", "count"):
            typer.echo(f"{key}\t{result[key]}")
        return

    state.console.print(
        f"Exported {result['count']} exercises as {result['format']} to {result['path']}"
    )

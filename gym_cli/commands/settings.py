"""Display preferences and progression rate settings."""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

import typer

from gym_cli.commands.common import display_flags, get_state, load_app, print_json_payload
from gym_cli.core.config import ConfigError, read_config_file, save_config
from gym_cli.core.constants import (
    COMPACT_MODES,
    REPS_PER_WEEK_RANGE,
    SECONDS_PER_WEEK_RANGE,
    THEMES,
)
from gym_cli.core.state import save_display_preferences


def settings_command(
    ctx: typer.Context,
    theme: Optional[str] = typer.Option(None, help="Theme: light|dark|system"),
    compact: Optional[str] = typer.Option(None, help="Compact mode: auto|on|off"),
    reps_per_week: Optional[int] = typer.Option(
        None,
        min=REPS_PER_WEEK_RANGE[0],
        max=REPS_PER_WEEK_RANGE[1],
        help="Save reps added per week (weight exercises) to the config file",
    ),
    seconds_per_week: Optional[int] = typer.Option(
        None,
        min=SECONDS_PER_WEEK_RANGE[0],
        max=SECONDS_PER_WEEK_RANGE[1],
        help="Save seconds added per week (timed exercises) to the config file",
    ),
) -> None:
    """Show settings, or update theme, compact mode and weekly rates."""
    state = get_state(ctx)

    if theme is not None and theme not in THEMES:
        raise typer.BadParameter(f"--theme must be one of: {', '.join(THEMES)}")
    if compact is not None and compact not in COMPACT_MODES:
        raise typer.BadParameter(f"--compact must be one of: {', '.join(COMPACT_MODES)}")

    app = load_app(state)
    changed = False

    if theme is not None or compact is not None:
        app.theme = theme or app.theme
        app.compact_mode = compact or app.compact_mode
        save_display_preferences(state.store, app)
        changed = True

    if reps_per_week is not None or seconds_per_week is not None:
        try:
            file_config = read_config_file(state.config_path)
            progression = dict(file_config.get("progression", {}))
            if reps_per_week is not None:
                progression["reps_per_week"] = reps_per_week
            if seconds_per_week is not None:
                progression["seconds_per_week"] = seconds_per_week
            file_config["progression"] = progression
            save_config(file_config, state.config_path)
        except ConfigError as exc:
            typer.echo(f"Config error: {exc}")
            raise typer.Exit(code=2)
        app.settings = replace(
            app.settings,
            reps_per_week=reps_per_week if reps_per_week is not None else app.settings.reps_per_week,
            seconds_per_week=(
                seconds_per_week if seconds_per_week is not None else app.settings.seconds_per_week
            ),
        )
        changed = True

    flags = display_flags(state, app)
    payload = {
        "status": "saved" if changed else "current",
        "theme": app.theme,
        "compact_mode": app.compact_mode,
        "dark": flags["dark"],
        "compact": flags["compact"],
        "reps_per_week": app.settings.reps_per_week,
        "seconds_per_week": app.settings.seconds_per_week,
        "config_path": str(state.config_path),
    }

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        for key, value in payload.items():
            typer.echo(f"{key}\t{str(value).lower() if isinstance(value, bool) else value}")
        return

    state.console.print(f"Theme: {app.theme} ({'dark' if flags['dark'] else 'light'})")
    state.console.print(f"Compact: {app.compact_mode} ({'on' if flags['compact'] else 'off'})")
    state.console.print(f"Reps/week: {app.settings.reps_per_week}")
    state.console.print(f"Seconds/week: {app.settings.seconds_per_week}")
    if changed:
        state.console.print("Settings saved")

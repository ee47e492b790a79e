"""Entry point for gym-cli."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from gym_cli import __version__
from gym_cli.commands.export import export_command
from gym_cli.commands.log import log_command, reset_command, start_command
from gym_cli.commands.settings import settings_command
from gym_cli.commands.show import exercises_command, scheme_command, show_command
from gym_cli.core.catalog import CatalogError, load_catalog
from gym_cli.core.config import (
    ConfigError,
    default_config_path,
    load_config,
    resolve_catalog_path,
    resolve_input,
    resolve_progression,
    resolve_small_screen_columns,
    resolve_state_file,
)
from gym_cli.core.state import CLIState
from gym_cli.core.storage import JsonFileStore

app = typer.Typer(
    add_completion=False,
    help="Plan and log a 4-week upper-body strength progression",
    invoke_without_command=True,
)


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler], force=True)


@app.callback()
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output JSON where available"),
    plain_output: bool = typer.Option(
        False,
        "--plain",
        help="Output plain text (no rich formatting/tables)",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    state_file: Optional[Path] = typer.Option(None, "--state-file", help="Path to saved progress file"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", help="YAML/JSON exercise catalog"),
    reps_per_week: Optional[int] = typer.Option(
        None,
        "--reps-per-week",
        help="Reps added per week for weight exercises (1-3)",
    ),
    seconds_per_week: Optional[int] = typer.Option(
        None,
        "--seconds-per-week",
        help="Seconds added per week for timed exercises (3-20)",
    ),
    system_dark: bool = typer.Option(
        False,
        "--system-dark",
        envvar="GYM_SYSTEM_DARK",
        help="Treat the system color scheme as dark (theme 'system')",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Quiet output"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Initialize global CLI state."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if json_output and plain_output:
        typer.echo("Options --json and --plain are mutually exclusive.")
        raise typer.Exit(code=2)

    _configure_logging(verbose, quiet)

    cfg_path = (config or default_config_path()).expanduser().resolve()
    try:
        cfg = load_config(cfg_path)
        settings = resolve_progression(cfg, reps_per_week, seconds_per_week)
        input_settings = resolve_input(cfg)
        small_screen_columns = resolve_small_screen_columns(cfg)
        exercises = load_catalog(resolve_catalog_path(cfg, explicit=catalog))
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}")
        raise typer.Exit(code=2)
    except CatalogError as exc:
        typer.echo(f"Catalog error: {exc}")
        raise typer.Exit(code=2)

    store_path = resolve_state_file(cfg, explicit=state_file)
    logging.getLogger(__name__).debug("Using state file %s", store_path)

    console = Console(
        quiet=quiet,
        no_color=plain_output,
        log_time=False,
        log_path=False,
    )
    ctx.obj = CLIState(
        json_output=(json_output and not plain_output),
        plain_output=plain_output,
        verbose=verbose,
        quiet=quiet,
        config_path=cfg_path,
        config=cfg,
        console=console,
        store=JsonFileStore(store_path),
        catalog=exercises,
        settings=settings,
        system_prefers_dark=system_dark,
        input_settings=input_settings,
        small_screen_columns=small_screen_columns,
    )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


# Top-level commands
app.command("show")(show_command)
app.command("start")(start_command)
app.command("log")(log_command)
app.command("reset")(reset_command)
app.command("export")(export_command)
app.command("settings")(settings_command)
app.command("exercises")(exercises_command)
app.command("scheme")(scheme_command)


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()

"""Configuration loading and persistence."""

from __future__ import annotations

import copy
import json
import math
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from gym_cli.core.constants import (
    CSV_FILENAME,
    DEFAULT_REPS_PER_WEEK,
    DEFAULT_SECONDS_PER_WEEK,
    REPS_PER_WEEK_RANGE,
    SECONDS_PER_WEEK_RANGE,
)
from gym_cli.core.models import InputSettings, ProgressionSettings


class ConfigError(RuntimeError):
    """Raised when config file parsing fails."""


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_path(path_str: str) -> Path:
    """Expand user/env vars and return absolute path."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_data_dir() -> Path:
    """Resolve XDG-style data directory with env override."""
    raw = os.getenv("GYM_DATA_DIR", "~/.local/share/gym")
    return expand_path(raw)


def default_config_path() -> Path:
    """Get default config file path."""
    raw = os.getenv("GYM_CONFIG_FILE", "~/.config/gym/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    data_dir = default_data_dir()
    return {
        "storage": {
            "state_file": str(data_dir / "state.json"),
        },
        "catalog": {
            "path": "",
        },
        "progression": {
            "reps_per_week": DEFAULT_REPS_PER_WEEK,
            "seconds_per_week": DEFAULT_SECONDS_PER_WEEK,
        },
        "input": {
            "round_weights": True,
            "weight_step": 0.5,
        },
        "display": {
            "small_screen_columns": 100,
        },
        "export": {
            "default_directory": ".",
            "filename": CSV_FILENAME,
        },
    }


def _read_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    try:
        if suffix in {".toml", ""}:
            loaded = tomllib.loads(text)
        else:
            loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults."""
    cfg_path = path or default_config_path()
    cfg = _default_config()
    if cfg_path.exists():
        cfg = _deep_merge(cfg, _read_config(cfg_path))
    return cfg


def _toml_literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if isinstance(value, list):
        items = ", ".join(_toml_literal(item) for item in value if item is not None)
        return f"[{items}]"
    raise TypeError(f"Unsupported TOML value type: {type(value)!r}")


def _dict_to_toml(data: Dict[str, Any], prefix: Optional[str] = None) -> str:
    lines = []
    plain_keys = []
    nested_keys = []

    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            nested_keys.append((key, value))
        else:
            plain_keys.append((key, value))

    if prefix is not None:
        lines.append(f"[{prefix}]")

    for key, value in plain_keys:
        lines.append(f"{key} = {_toml_literal(value)}")

    if plain_keys and nested_keys:
        lines.append("")

    for index, (key, value) in enumerate(nested_keys):
        table_name = key if prefix is None else f"{prefix}.{key}"
        lines.append(_dict_to_toml(value, prefix=table_name))
        if index != len(nested_keys) - 1:
            lines.append("")

    return "\n".join(lines)


def save_config(config: Dict[str, Any], path: Optional[Path] = None) -> Path:
    """Save configuration to disk as TOML (default) or JSON."""
    cfg_path = path or default_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    if cfg_path.suffix.lower() == ".json":
        cfg_path.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
        return cfg_path

    cfg_path.write_text(_dict_to_toml(config).strip() + "\n", encoding="utf-8")
    return cfg_path


def resolve_state_file(config: Dict[str, Any], explicit: Optional[Path] = None) -> Path:
    """Resolve state store path: CLI flag, then env, then config."""
    if explicit is not None:
        return explicit.expanduser().resolve()
    raw = os.getenv("GYM_STATE_FILE") or config.get("storage", {}).get("state_file")
    if not raw:
        raw = str(default_data_dir() / "state.json")
    return expand_path(raw)


def resolve_catalog_path(config: Dict[str, Any], explicit: Optional[Path] = None) -> Optional[Path]:
    """Resolve custom catalog file, None for the built-in program."""
    if explicit is not None:
        return explicit.expanduser().resolve()
    raw = config.get("catalog", {}).get("path")
    return expand_path(raw) if raw else None


def resolve_output_dir(config: Dict[str, Any], explicit: Optional[Path] = None) -> Path:
    """Resolve output directory with CLI override first."""
    if explicit is not None:
        return explicit.expanduser().resolve()
    raw = os.getenv("GYM_OUTPUT_DIR") or config.get("export", {}).get("default_directory", ".")
    return expand_path(raw)


def _bounded_int(value: Any, bounds: tuple[int, int], name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"progression.{name} must be an integer, got {value!r}") from exc
    low, high = bounds
    if not low <= number <= high:
        raise ConfigError(f"progression.{name} must be between {low} and {high}, got {number}")
    return number


def resolve_progression(
    config: Dict[str, Any],
    reps_per_week: Optional[int] = None,
    seconds_per_week: Optional[int] = None,
) -> ProgressionSettings:
    """Build progression settings from config with per-invocation overrides."""
    section = config.get("progression", {})
    reps = reps_per_week if reps_per_week is not None else section.get("reps_per_week", DEFAULT_REPS_PER_WEEK)
    seconds = (
        seconds_per_week
        if seconds_per_week is not None
        else section.get("seconds_per_week", DEFAULT_SECONDS_PER_WEEK)
    )
    return ProgressionSettings(
        reps_per_week=_bounded_int(reps, REPS_PER_WEEK_RANGE, "reps_per_week"),
        seconds_per_week=_bounded_int(seconds, SECONDS_PER_WEEK_RANGE, "seconds_per_week"),
    )


def resolve_input(config: Dict[str, Any]) -> InputSettings:
    """Validate the [input] section used when storing weight entries."""
    section = config.get("input", {})
    round_weights = section.get("round_weights", True)
    if not isinstance(round_weights, bool):
        raise ConfigError(f"input.round_weights must be true or false, got {round_weights!r}")
    raw_step = section.get("weight_step", 0.5)
    if isinstance(raw_step, bool) or not isinstance(raw_step, (int, float)):
        raise ConfigError(f"input.weight_step must be a number, got {raw_step!r}")
    step = float(raw_step)
    if not math.isfinite(step) or step <= 0:
        raise ConfigError(f"input.weight_step must be greater than 0, got {raw_step!r}")
    return InputSettings(round_weights=round_weights, weight_step=step)


def resolve_small_screen_columns(config: Dict[str, Any]) -> int:
    """Console width below which compact mode 'auto' turns on."""
    raw = config.get("display", {}).get("small_screen_columns", 100)
    if isinstance(raw, bool) or not isinstance(raw, int) or raw <= 0:
        raise ConfigError(f"display.small_screen_columns must be a positive integer, got {raw!r}")
    return raw


def read_config_file(path: Path) -> Dict[str, Any]:
    """Read only what the config file itself contains, without defaults."""
    if not path.exists():
        return {}
    return _read_config(path)

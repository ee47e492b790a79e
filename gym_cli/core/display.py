"""Theme and compact-mode resolution against system signals."""

from __future__ import annotations

from gym_cli.core.constants import COMPACT_MODES, DEFAULT_COMPACT_MODE, DEFAULT_THEME, THEMES


def normalize_theme(value: object) -> str:
    return value if value in THEMES else DEFAULT_THEME  # type: ignore[return-value]


def normalize_compact_mode(value: object) -> str:
    return value if value in COMPACT_MODES else DEFAULT_COMPACT_MODE  # type: ignore[return-value]


def is_dark(theme: str, system_prefers_dark: bool) -> bool:
    """Dark when forced, or when following a dark system setting."""
    return theme == "dark" or (theme == "system" and system_prefers_dark)


def is_compact(compact_mode: str, is_small_screen: bool) -> bool:
    """Compact when forced on, or automatically on small screens."""
    return compact_mode == "on" or (compact_mode == "auto" and is_small_screen)

"""Static constants and mappings for the gym CLI."""

from __future__ import annotations

WEEKS = 4

UNIT_WEIGHT = "kg"
UNIT_TIME = "sek"
UNITS = (UNIT_WEIGHT, UNIT_TIME)

# Sentinel for "no value" in targets, start values and rounding results.
EMPTY = ""

DEFAULT_SETS = 3
DEFAULT_REPS = 10
DEFAULT_MAX_REPS = 12

SCHEME_SEPARATOR = "×"
RANGE_DELIMITERS = ("–", "-")

DEFAULT_EXERCISES = [
    {"id": "bench", "name": "Bänkpress", "scheme": "4×8–10", "unit": UNIT_WEIGHT},
    {"id": "lat", "name": "Latsdrag", "scheme": "4×8–10", "unit": UNIT_WEIGHT},
    {"id": "db_sh_press", "name": "Hantelpress (sittande)", "scheme": "3×10–12", "unit": UNIT_WEIGHT},
    {"id": "row", "name": "Sittande rodd", "scheme": "3×10–12", "unit": UNIT_WEIGHT},
    {"id": "incl_db", "name": "Lutande hantelpress", "scheme": "3×10–12", "unit": UNIT_WEIGHT},
    {"id": "curl", "name": "Bicepscurl", "scheme": "3×12", "unit": UNIT_WEIGHT},
    {"id": "pushdown", "name": "Triceps pushdown", "scheme": "3×12", "unit": UNIT_WEIGHT},
    {"id": "plank", "name": "Plankan", "scheme": "3×30–45 sek", "unit": UNIT_TIME},
]

# Key-value store keys
PROGRESS_LOG_KEY = "progressLog"
THEME_KEY = "theme"
COMPACT_KEY = "compactMode"

THEMES = ("light", "dark", "system")
COMPACT_MODES = ("auto", "on", "off")
DEFAULT_THEME = "system"
DEFAULT_COMPACT_MODE = "auto"

REPS_PER_WEEK_RANGE = (1, 3)
SECONDS_PER_WEEK_RANGE = (3, 20)
DEFAULT_REPS_PER_WEEK = 1
DEFAULT_SECONDS_PER_WEEK = 5

CSV_HEADER = [
    "Övning",
    "Set×Reps",
    "Start",
    "Mål v1",
    "Utfört v1",
    "Mål v2",
    "Utfört v2",
    "Mål v3",
    "Utfört v3",
    "Mål v4",
    "Utfört v4",
]
CSV_FILENAME = "gym_overkropp_4v.csv"
CSV_MIME_TYPE = "text/csv; charset=utf-8"

TARGET_LABELS = {UNIT_WEIGHT: "reps", UNIT_TIME: "sek"}

"""Four-week upper-body progression planner."""

__version__ = "0.1.0"

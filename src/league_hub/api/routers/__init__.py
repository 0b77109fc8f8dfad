"""API routers."""

from . import playoffs, schedule, standings, stats

__all__ = ["playoffs", "schedule", "standings", "stats"]

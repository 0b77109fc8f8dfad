"""
Statistics aggregators.

These aggregators convert per-game stat entries from the game export into
season lines. Derived stats are recomputed from the summed totals.
"""

from .stats import DERIVED_FIELDS, StatAggregator, derive_stats, passer_rating

__all__ = ["DERIVED_FIELDS", "StatAggregator", "derive_stats", "passer_rating"]

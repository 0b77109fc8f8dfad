"""
Playoff seeding and bracket advancement.
"""

from .advancement import advance_bracket, apply_result, is_playoff_game
from .seeder import PlayoffSeeder, WILD_CARD_PAIRINGS

__all__ = [
    "PlayoffSeeder",
    "WILD_CARD_PAIRINGS",
    "advance_bracket",
    "apply_result",
    "is_playoff_game",
]

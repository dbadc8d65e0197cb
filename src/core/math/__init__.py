"""
Core math modules.

Ranking and combinatorics over frequency tables, deterministic and exhaustive.
"""

# Ranker
from src.core.math.ranking import rank, rank_entries

# ComboGenerator
from src.core.math.combinatorics import (
    MAX_GAMES,
    Combinations,
    check_selection_capacity,
    combinations,
    count_combinations,
)

__all__ = [
    # Ranker
    "rank",
    "rank_entries",
    # ComboGenerator — Constants
    "MAX_GAMES",
    # ComboGenerator — Types
    "Combinations",
    # ComboGenerator — Functions
    "check_selection_capacity",
    "combinations",
    "count_combinations",
]

"""
Domain models and value objects.

Contains FrequencyEntry, FrequencyTable, Direction and the row parser.
"""

from src.core.domain.direction import Direction
from src.core.domain.frequency import (
    DuplicatePolicy,
    FrequencyEntry,
    FrequencyTable,
    parse_frequency_row,
    parse_frequency_rows,
)

__all__ = [
    # Direction
    "Direction",
    # Frequency table
    "DuplicatePolicy",
    "FrequencyEntry",
    "FrequencyTable",
    "parse_frequency_row",
    "parse_frequency_rows",
]

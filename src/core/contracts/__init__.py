"""
Contract Validation Module

Валидация JSON контрактов (отчёт генерации).
"""

from .validators import (
    ContractValidator,
    GameReportValidator,
    SchemaLoader,
    validate_game_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "GameReportValidator",
    # Functions
    "validate_game_report",
]

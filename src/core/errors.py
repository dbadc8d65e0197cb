"""
Errors — Таксономия ошибок ядра

Все ошибки ядра пробрасываются синхронно вызывающему коду.
Ядро не логирует, не повторяет и не восстанавливается частично:
либо полный Pool и полный GameSet, либо исключение.

Иерархия:
- LottoError
  - MalformedRowError
    - DuplicateNumberError
  - NegativeFrequencyError
  - InvalidPoolSizeError
  - InvalidSelectionSizeError
  - SelectionTooLargeError
"""

from typing import Optional, Sequence


class LottoError(Exception):
    """Базовая ошибка ядра (ловится только на уровне CLI)."""

    pass


# =============================================================================
# ОШИБКИ ПАРСИНГА
# =============================================================================


class MalformedRowError(LottoError):
    """
    Строка таблицы частот не является парой (number, frequency) из целых чисел.

    Attributes:
        row_index: Индекс строки (с нуля) во входной последовательности
        row: Исходная строка как есть
    """

    def __init__(self, message: str, row_index: Optional[int] = None, row: Optional[Sequence] = None):
        super().__init__(message)
        self.row_index = row_index
        self.row = row


class DuplicateNumberError(MalformedRowError):
    """Номер повторяется в таблице при политике DuplicatePolicy.REJECT."""

    pass


class NegativeFrequencyError(LottoError):
    """Частота в строке меньше нуля."""

    def __init__(self, message: str, row_index: Optional[int] = None, row: Optional[Sequence] = None):
        super().__init__(message)
        self.row_index = row_index
        self.row = row


# =============================================================================
# ОШИБКИ РАЗМЕРОВ
# =============================================================================


class InvalidPoolSizeError(LottoError):
    """Запрошенный размер пула <= 0."""

    pass


class InvalidSelectionSizeError(LottoError):
    """Размер комбинации k < 1 или k > длины пула."""

    pass


class SelectionTooLargeError(LottoError):
    """
    C(n, k) превышает допустимый лимит игр.

    Проверяется до перебора, перебор не начинается.
    """

    def __init__(self, message: str, game_count: int, max_games: int):
        super().__init__(message)
        self.game_count = game_count
        self.max_games = max_games

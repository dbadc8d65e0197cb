"""
FrequencyTable — Таблица частот выпадения номеров

Immutable Pydantic модели для пар (number, frequency) и парсер сырых строк.

Вход парсера: последовательность строк из двух текстовых полей
(number, frequency), например из CSV-ридера или скрейпера.
Заголовки, комментарии и пустые строки удаляет вызывающий код.

ИНВАРИАНТЫ:
1. number >= 0, frequency >= 0
2. Каждый number встречается в таблице не более одного раза
3. Политика дубликатов задаётся явно (DuplicatePolicy):
   - LAST_WINS: последняя строка с тем же number заменяет предыдущую
   - REJECT: повтор number → DuplicateNumberError
"""

import re
from enum import Enum
from typing import Iterable, Sequence

from pydantic import BaseModel, Field, model_validator

from src.core.errors import DuplicateNumberError, MalformedRowError, NegativeFrequencyError


# Целое в десятичной записи с необязательным знаком (без '_', '.', пробелов внутри)
INTEGER_RE = re.compile(r"^[+-]?\d+$")


# =============================================================================
# ENUMS
# =============================================================================


class DuplicatePolicy(str, Enum):
    """Что делать с повторяющимся number во входных строках"""

    LAST_WINS = "last_wins"
    REJECT = "reject"


# =============================================================================
# MODELS
# =============================================================================


class FrequencyEntry(BaseModel):
    """Один номер и сколько раз он выпадал"""

    number: int = Field(..., ge=0, description="Номер лотереи")
    frequency: int = Field(..., ge=0, description="Количество выпадений")

    model_config = {"frozen": True}


class FrequencyTable(BaseModel):
    """
    Неупорядоченный набор FrequencyEntry без повторов number.

    Порядок entries сохраняет порядок первого появления номера во входе,
    но семантически таблица неупорядочена: Ranker задаёт свой порядок.
    """

    entries: tuple[FrequencyEntry, ...] = Field(default=(), description="Записи таблицы")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_unique_numbers(self) -> "FrequencyTable":
        """Проверка, что каждый number встречается один раз"""
        seen: set[int] = set()
        for entry in self.entries:
            if entry.number in seen:
                raise ValueError(f"duplicate number {entry.number} in frequency table")
            seen.add(entry.number)
        return self

    def __len__(self) -> int:
        return len(self.entries)

    def numbers(self) -> tuple[int, ...]:
        """Номера в порядке хранения"""
        return tuple(entry.number for entry in self.entries)

    def frequency_of(self, number: int) -> int:
        """
        Частота номера.

        Raises:
            KeyError: Если номера нет в таблице
        """
        for entry in self.entries:
            if entry.number == number:
                return entry.frequency
        raise KeyError(number)


# =============================================================================
# PARSER
# =============================================================================


def _parse_int(field, row_index: int, row: Sequence) -> int:
    text = field.strip() if isinstance(field, str) else str(field)
    if not INTEGER_RE.match(text):
        raise MalformedRowError(
            f"row {row_index}: {field!r} is not a valid integer", row_index=row_index, row=row
        )
    try:
        return int(text)
    except ValueError as e:
        # int() ограничивает длину десятичной строки (sys.get_int_max_str_digits)
        raise MalformedRowError(
            f"row {row_index}: integer field of {len(text)} characters is too long",
            row_index=row_index,
            row=row,
        ) from e


def parse_frequency_row(row: Sequence, row_index: int = 0) -> FrequencyEntry:
    """
    Разбор одной строки (number, frequency).

    Args:
        row: Последовательность ровно из двух полей
        row_index: Индекс строки для сообщений об ошибках

    Returns:
        FrequencyEntry

    Raises:
        MalformedRowError: Не два поля, поле не целое, или number < 0
        NegativeFrequencyError: frequency < 0
    """
    if isinstance(row, (str, bytes)) or len(row) != 2:
        raise MalformedRowError(
            f"row {row_index}: expected 2 fields (number, frequency), got {row!r}",
            row_index=row_index,
            row=row,
        )

    number = _parse_int(row[0], row_index, row)
    frequency = _parse_int(row[1], row_index, row)

    if number < 0:
        raise MalformedRowError(
            f"row {row_index}: number {number} must be non-negative", row_index=row_index, row=row
        )
    if frequency < 0:
        raise NegativeFrequencyError(
            f"row {row_index}: frequency {frequency} for number {number} must be non-negative",
            row_index=row_index,
            row=row,
        )

    return FrequencyEntry(number=number, frequency=frequency)


def parse_frequency_rows(
    rows: Iterable[Sequence],
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS,
) -> FrequencyTable:
    """
    Построение FrequencyTable из сырых строк.

    Парсинг fail-fast: первая невалидная строка прерывает разбор,
    частичная таблица не возвращается.

    Args:
        rows: Строки (number, frequency), поля текстовые
        duplicate_policy: Политика для повторяющихся номеров

    Returns:
        FrequencyTable

    Raises:
        MalformedRowError: Невалидная строка
        DuplicateNumberError: Повтор номера при DuplicatePolicy.REJECT
        NegativeFrequencyError: Отрицательная частота
    """
    by_number: dict[int, FrequencyEntry] = {}

    for row_index, row in enumerate(rows):
        entry = parse_frequency_row(row, row_index)
        if entry.number in by_number and duplicate_policy == DuplicatePolicy.REJECT:
            raise DuplicateNumberError(
                f"row {row_index}: number {entry.number} appears more than once",
                row_index=row_index,
                row=row,
            )
        # LAST_WINS: dict сохраняет позицию первого появления, значение последнее
        by_number[entry.number] = entry

    return FrequencyTable(entries=tuple(by_number.values()))

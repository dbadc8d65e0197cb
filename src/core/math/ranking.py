"""
Ranker — Отбор N самых частых или самых редких номеров

Алгоритм:
1. Сортировка всех записей по frequency:
   - MOST: по убыванию
   - LEAST: по возрастанию
2. Tie-break (одинаковая frequency): меньший number идёт первым
   в ОБОИХ направлениях
3. Первые min(pool_size, len(table)) записей → только number

Порядок полностью определяется ключом сортировки и не зависит от
устойчивости сортировки или порядка строк во входе.

pool_size > len(table) не ошибка: пул усекается до размера таблицы.
"""

from typing import Callable

from src.core.domain.direction import Direction
from src.core.domain.frequency import FrequencyEntry, FrequencyTable
from src.core.errors import InvalidPoolSizeError


def _most_key(entry: FrequencyEntry) -> tuple[int, int]:
    return (-entry.frequency, entry.number)


def _least_key(entry: FrequencyEntry) -> tuple[int, int]:
    return (entry.frequency, entry.number)


_SORT_KEYS: dict[Direction, Callable[[FrequencyEntry], tuple[int, int]]] = {
    Direction.MOST: _most_key,
    Direction.LEAST: _least_key,
}


def rank_entries(table: FrequencyTable, direction: Direction) -> tuple[FrequencyEntry, ...]:
    """
    Полное ранжирование таблицы без усечения.

    Args:
        table: Таблица частот
        direction: MOST или LEAST

    Returns:
        Записи в порядке ранга
    """
    return tuple(sorted(table.entries, key=_SORT_KEYS[Direction(direction)]))


def rank(table: FrequencyTable, pool_size: int, direction: Direction) -> tuple[int, ...]:
    """
    Pool: pool_size номеров с наибольшей (MOST) или наименьшей (LEAST) частотой.

    Args:
        table: Таблица частот
        pool_size: Желаемый размер пула (> 0)
        direction: MOST или LEAST

    Returns:
        Номера в порядке ранга, длина min(pool_size, len(table))

    Raises:
        InvalidPoolSizeError: pool_size <= 0

    Examples:
        >>> table = parse_frequency_rows([("1", "5"), ("2", "3"), ("3", "3"), ("4", "1")])
        >>> rank(table, 3, Direction.LEAST)
        (4, 2, 3)
        >>> rank(table, 3, Direction.MOST)
        (1, 2, 3)
    """
    if pool_size <= 0:
        raise InvalidPoolSizeError(f"pool size must be positive, got {pool_size}")

    ranked = rank_entries(table, direction)
    return tuple(entry.number for entry in ranked[:pool_size])

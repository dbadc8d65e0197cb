"""
ComboGenerator — Перебор всех k-комбинаций пула

Порядок генерации: лексикографический по кортежам индексов пула
(i1 < i2 < ... < ik), т.е. пул рассматривается как массив в порядке ранга.

ДВОЙНОЙ ПОРЯДОК:
- Порядок КОМБИНАЦИЙ задаётся позициями в пуле (ранг)
- Порядок ЧИСЕЛ внутри комбинации — по возрастанию значения

Пример: pool = (4, 2, 3), k = 2
    индексы (0,1) → (4,2) → (2, 4)
    индексы (0,2) → (4,3) → (3, 4)
    индексы (1,2) → (2,3) → (2, 3)

Количество комбинаций C(n, k) известно до перебора; при превышении
лимита max_games перебор не начинается (SelectionTooLargeError).
"""

import itertools
import math
from typing import Final, Iterator, Sequence

from src.core.errors import InvalidSelectionSizeError, SelectionTooLargeError


# =============================================================================
# ЛИМИТЫ
# =============================================================================

# Максимальное количество игр в одном GameSet
MAX_GAMES: Final[int] = 1_000_000


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def count_combinations(n: int, k: int) -> int:
    """
    C(n, k) без перебора.

    Returns:
        Биномиальный коэффициент (0 если k > n или k < 0)
    """
    if k < 0 or n < 0 or k > n:
        return 0
    return math.comb(n, k)


def check_selection_capacity(n: int, k: int, max_games: int = MAX_GAMES) -> int:
    """
    Проверка k и C(n, k) до перебора.

    Args:
        n: Длина пула
        k: Размер комбинации
        max_games: Лимит количества игр

    Returns:
        C(n, k)

    Raises:
        InvalidSelectionSizeError: k < 1 или k > n
        SelectionTooLargeError: C(n, k) > max_games
    """
    if k < 1 or k > n:
        raise InvalidSelectionSizeError(
            f"selection size must be between 1 and pool length {n}, got {k}"
        )

    game_count = math.comb(n, k)
    if game_count > max_games:
        raise SelectionTooLargeError(
            f"C({n}, {k}) = {game_count} games exceeds limit of {max_games}",
            game_count=game_count,
            max_games=max_games,
        )
    return game_count


# =============================================================================
# ГЕНЕРАТОР
# =============================================================================


class Combinations:
    """
    Ленивая, конечная, перезапускаемая последовательность k-комбинаций.

    Каждый iter() начинает перебор заново; len() равен C(n, k) и
    вычисляется без перебора.
    """

    def __init__(self, pool: Sequence[int], k: int, max_games: int = MAX_GAMES):
        pool = tuple(pool)
        if len(set(pool)) != len(pool):
            raise ValueError(f"pool must not contain duplicates: {pool}")

        self._count = check_selection_capacity(len(pool), k, max_games)
        self._pool = pool
        self._k = k

    @property
    def pool(self) -> tuple[int, ...]:
        return self._pool

    @property
    def k(self) -> int:
        return self._k

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        # itertools.combinations перебирает индексы в лексикографическом порядке
        for combo in itertools.combinations(self._pool, self._k):
            yield tuple(sorted(combo))

    def __repr__(self) -> str:
        return f"Combinations(pool={self._pool}, k={self._k}, count={self._count})"


def combinations(pool: Sequence[int], k: int, max_games: int = MAX_GAMES) -> Combinations:
    """
    Все k-комбинации пула.

    Args:
        pool: Пул в порядке ранга, без повторов
        k: Размер комбинации (1 <= k <= len(pool))
        max_games: Лимит C(n, k)

    Returns:
        Combinations (итерируемый многократно, len() == C(n, k))

    Raises:
        InvalidSelectionSizeError: k < 1 или k > len(pool)
        SelectionTooLargeError: C(n, k) > max_games
        ValueError: Пул содержит повторы

    Examples:
        >>> list(combinations((4, 2, 3), 2))
        [(2, 4), (3, 4), (2, 3)]
    """
    return Combinations(pool, k, max_games)

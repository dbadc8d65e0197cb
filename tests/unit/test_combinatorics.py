"""
Тесты для ComboGenerator

Проверяет:
1. Лексикографический порядок по индексам пула
2. Числа внутри комбинации по возрастанию (двойной порядок)
3. Количество C(n, k) и отсутствие повторов
4. Перезапускаемость и детерминизм
5. InvalidSelectionSizeError / SelectionTooLargeError до перебора
"""

import math

import pytest

from src.core.errors import InvalidSelectionSizeError, SelectionTooLargeError
from src.core.math import (
    MAX_GAMES,
    Combinations,
    check_selection_capacity,
    combinations,
    count_combinations,
)


# =============================================================================
# ORDER
# =============================================================================


class TestOrder:
    """Порядок генерации"""

    def test_rank_order_pool_scenario(self) -> None:
        """pool (4, 2, 3), k=2 → [(2,4), (3,4), (2,3)]"""
        assert list(combinations((4, 2, 3), 2)) == [(2, 4), (3, 4), (2, 3)]

    def test_lexicographic_index_order(self) -> None:
        """Для отсортированного пула порядок совпадает с лексикографическим по значениям"""
        assert list(combinations((1, 2, 3, 4), 2)) == [
            (1, 2),
            (1, 3),
            (1, 4),
            (2, 3),
            (2, 4),
            (3, 4),
        ]

    def test_descending_pool_order_follows_positions(self) -> None:
        """Порядок игр следует позициям пула, а не значениям"""
        assert list(combinations((9, 7, 5, 1), 3)) == [
            (5, 7, 9),
            (1, 7, 9),
            (1, 5, 9),
            (1, 5, 7),
        ]

    def test_each_combination_ascending(self) -> None:
        for combo in combinations((30, 4, 17, 8, 22, 1), 4):
            assert list(combo) == sorted(combo)
            assert len(set(combo)) == len(combo)

    def test_k_equals_n_gives_sorted_pool(self) -> None:
        assert list(combinations((4, 2, 3), 3)) == [(2, 3, 4)]

    def test_k_one_gives_singletons_in_pool_order(self) -> None:
        assert list(combinations((4, 2, 3), 1)) == [(4,), (2,), (3,)]


# =============================================================================
# CARDINALITY
# =============================================================================


class TestCardinality:
    """Количество комбинаций"""

    @pytest.mark.parametrize("n,k", [(1, 1), (5, 2), (6, 3), (8, 6), (10, 5), (12, 1)])
    def test_count_is_binomial(self, n, k) -> None:
        pool = tuple(range(100, 100 + n))
        combos = list(combinations(pool, k))
        assert len(combos) == math.comb(n, k)
        assert len({frozenset(c) for c in combos}) == len(combos)
        assert all(set(c) <= set(pool) for c in combos)

    def test_len_without_enumeration(self) -> None:
        """len() доступен без перебора"""
        combos = combinations(tuple(range(40)), 3)
        assert len(combos) == 9880

    def test_count_combinations(self) -> None:
        assert count_combinations(8, 6) == 28
        assert count_combinations(3, 5) == 0
        assert count_combinations(3, -1) == 0


# =============================================================================
# DETERMINISM
# =============================================================================


class TestRestartable:
    """Повторные проходы"""

    def test_iterating_twice_gives_same_sequence(self) -> None:
        combos = combinations((8, 3, 6, 1, 5), 3)
        first = list(combos)
        second = list(combos)
        assert first == second
        assert len(first) == 10

    def test_separate_calls_identical(self) -> None:
        assert list(combinations((8, 3, 6, 1), 2)) == list(combinations((8, 3, 6, 1), 2))

    def test_partial_iteration_does_not_affect_restart(self) -> None:
        combos = combinations((1, 2, 3, 4), 2)
        it = iter(combos)
        next(it)
        next(it)
        assert next(iter(combos)) == (1, 2)

    def test_exposes_pool_and_k(self) -> None:
        combos = combinations([4, 2, 3], 2)
        assert isinstance(combos, Combinations)
        assert combos.pool == (4, 2, 3)
        assert combos.k == 2
        assert "count=3" in repr(combos)


# =============================================================================
# ERRORS
# =============================================================================


class TestSelectionErrors:
    """Ошибки размера выбора"""

    def test_k_greater_than_pool_raises(self) -> None:
        """pool из 3, k=5 → InvalidSelectionSizeError"""
        with pytest.raises(InvalidSelectionSizeError, match="between 1 and pool length 3"):
            combinations((4, 2, 3), 5)

    @pytest.mark.parametrize("k", [0, -2])
    def test_non_positive_k_raises(self, k) -> None:
        with pytest.raises(InvalidSelectionSizeError):
            combinations((4, 2, 3), k)

    def test_empty_pool_raises(self) -> None:
        with pytest.raises(InvalidSelectionSizeError):
            combinations((), 1)

    def test_too_many_games_raises_before_enumeration(self) -> None:
        with pytest.raises(SelectionTooLargeError) as exc_info:
            combinations(tuple(range(60)), 30)
        assert exc_info.value.game_count == math.comb(60, 30)
        assert exc_info.value.max_games == MAX_GAMES

    def test_custom_limit(self) -> None:
        assert check_selection_capacity(8, 6, max_games=28) == 28
        with pytest.raises(SelectionTooLargeError, match="exceeds limit of 27"):
            check_selection_capacity(8, 6, max_games=27)

    def test_duplicate_pool_rejected(self) -> None:
        with pytest.raises(ValueError, match="duplicates"):
            combinations((1, 2, 2), 2)

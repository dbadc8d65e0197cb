"""Engine: сырые строки → Pool + GameSet.

Порядок:
1. parse_frequency_rows — FrequencyTable
2. rank — Pool
3. combinations — GameSet (материализуется целиком)

Все ошибки 1-3 пробрасываются без обёртки. Частичный результат
не возвращается никогда.
"""

from dataclasses import dataclass
from typing import Final, Iterable, Sequence

from src.core.domain.direction import Direction
from src.core.domain.frequency import DuplicatePolicy, parse_frequency_rows
from src.core.math.combinatorics import MAX_GAMES, combinations
from src.core.math.ranking import rank


# Умолчания запроса: 8 номеров в пуле, 6 в игре, самые редкие
DEFAULT_POOL_SIZE: Final[int] = 8
DEFAULT_SELECT_SIZE: Final[int] = 6
DEFAULT_DIRECTION: Final[Direction] = Direction.LEAST


@dataclass(frozen=True)
class EngineResult:
    """Результат генерации."""

    pool: tuple[int, ...]
    games: tuple[tuple[int, ...], ...]

    # Параметры запроса для диагностики/отчёта
    direction: Direction
    pool_size: int
    select_size: int
    table_size: int

    @property
    def game_count(self) -> int:
        return len(self.games)

    @property
    def pool_truncated(self) -> bool:
        """Пул короче запрошенного (в таблице меньше номеров, чем pool_size)"""
        return len(self.pool) < self.pool_size


class LottoEngine:
    """Движок генерации игр.

    Stateless: конфигурация задаётся в конструкторе, generate()
    идемпотентен для одинаковых входов.
    """

    def __init__(
        self,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS,
        max_games: int = MAX_GAMES,
    ):
        self.duplicate_policy = duplicate_policy
        self.max_games = max_games

    def generate(
        self,
        raw_rows: Iterable[Sequence],
        pool_size: int = DEFAULT_POOL_SIZE,
        select_size: int = DEFAULT_SELECT_SIZE,
        direction: Direction = DEFAULT_DIRECTION,
    ) -> EngineResult:
        """Генерация Pool и полного GameSet.

        Args:
            raw_rows: Строки (number, frequency), поля текстовые
            pool_size: Размер пула (> 0)
            select_size: Размер одной игры (1 <= select_size <= len(pool))
            direction: MOST или LEAST

        Returns:
            EngineResult

        Raises:
            MalformedRowError, NegativeFrequencyError: невалидная таблица
            InvalidPoolSizeError: pool_size <= 0
            InvalidSelectionSizeError: select_size вне [1, len(pool)]
            SelectionTooLargeError: C(len(pool), select_size) > max_games
        """
        direction = Direction(direction)
        table = parse_frequency_rows(raw_rows, self.duplicate_policy)
        pool = rank(table, pool_size, direction)
        games = tuple(combinations(pool, select_size, self.max_games))

        return EngineResult(
            pool=pool,
            games=games,
            direction=direction,
            pool_size=pool_size,
            select_size=select_size,
            table_size=len(table),
        )


def generate(
    raw_rows: Iterable[Sequence],
    pool_size: int = DEFAULT_POOL_SIZE,
    select_size: int = DEFAULT_SELECT_SIZE,
    direction: Direction = DEFAULT_DIRECTION,
) -> EngineResult:
    """generate() с настройками движка по умолчанию."""
    return LottoEngine().generate(raw_rows, pool_size, select_size, direction)

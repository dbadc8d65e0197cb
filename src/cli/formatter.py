"""
Formatter — Отображение результата генерации

Чистые функции над EngineResult; ширина выравнивания передаётся явно.

Текстовый отчёт:

    Processing: 'data.csv', selecting: 2 numbers from 3 least frequent numbers
    3 game(s) generated using: [ 4,  2,  3]
    01: [ 2,  4]
    02: [ 3,  4]
    03: [ 2,  3]
"""

import json
from typing import Any, Dict, Optional, Sequence

from src.core.contracts import validate_game_report
from src.engine import EngineResult

REPORT_SCHEMA_VERSION = "1"


def format_numbers(numbers: Sequence[int], width: int = 2) -> str:
    """'[ 4,  2,  3]' — каждый номер выровнен пробелами по ширине width"""
    return "[" + ", ".join(str(n).rjust(width) for n in numbers) + "]"


def format_games(games: Sequence[Sequence[int]], width: int = 2) -> list[str]:
    """Строки '01: [ 2,  4]'; номер игры дополняется нулями до 2 цифр или больше"""
    index_width = max(2, len(str(len(games))))
    return [
        f"{str(i).zfill(index_width)}: {format_numbers(game, width)}"
        for i, game in enumerate(games, start=1)
    ]


def format_report(result: EngineResult, source: Optional[str], width: int = 2) -> str:
    """Полный текстовый отчёт"""
    lines = [
        f"Processing: '{source}', selecting: {result.select_size} numbers "
        f"from {result.pool_size} {result.direction.label} numbers",
        f"{result.game_count} game(s) generated using: {format_numbers(result.pool, width)}",
    ]
    lines.extend(format_games(result.games, width))
    return "\n".join(lines)


def report_as_dict(result: EngineResult, source: Optional[str]) -> Dict[str, Any]:
    """JSON отчёт по контракту game_report.json (валидируется перед возвратом)"""
    report = {
        "schema_version": REPORT_SCHEMA_VERSION,
        "source": source,
        "direction": result.direction.value,
        "pool_size": result.pool_size,
        "select_size": result.select_size,
        "pool": list(result.pool),
        "game_count": result.game_count,
        "games": [list(game) for game in result.games],
    }
    validate_game_report(report)
    return report


def format_json_report(result: EngineResult, source: Optional[str]) -> str:
    return json.dumps(report_as_dict(result, source), indent=2)

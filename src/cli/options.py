"""
Options — Конфигурация командной строки

Явная структура GeneratorOptions с именованными полями и документированными
умолчаниями. Валидируется один раз на границе, до вызова ядра.

validate_options(argv) — единственная функция валидации, возвращает
tagged result (OptionsResult): либо валидные options, либо конкретную
ошибку. Вызывающий код проходит по одному линейному пути.
"""

import argparse
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, Sequence

from pydantic import BaseModel, Field, ValidationError, model_validator

from src.core.domain.direction import Direction
from src.core.domain.frequency import DuplicatePolicy
from src.core.math.combinatorics import MAX_GAMES
from src.engine import DEFAULT_DIRECTION, DEFAULT_POOL_SIZE, DEFAULT_SELECT_SIZE


# =============================================================================
# УМОЛЧАНИЯ
# =============================================================================

DEFAULT_PAD_WIDTH: Final[int] = 2

USAGE: Final[str] = """\
Lotto Number Generator

synopsis:
  Generate Lotto numbers from frequency tables
usage:
  $ lotto {options} file
  $ lotto --scrape url
where:
  file  Comma-separated CSV file of the form:

        # datafile.csv
        number, frequency
        1, 345
        2, 340
        ...

  url   URL containing list of lotto numbers with frequencies
"""


class OutputFormat(str, Enum):
    """Формат вывода отчёта"""

    TEXT = "text"
    JSON = "json"


# =============================================================================
# OPTIONS MODEL
# =============================================================================


class GeneratorOptions(BaseModel):
    """Валидированная конфигурация одного запуска CLI"""

    pool_size: int = Field(DEFAULT_POOL_SIZE, ge=1, description="Сколько номеров брать в пул")
    select_size: int = Field(DEFAULT_SELECT_SIZE, ge=1, description="Сколько номеров в одной игре")
    direction: Direction = Field(DEFAULT_DIRECTION, description="MOST или LEAST")
    source: Optional[str] = Field(None, description="CSV файл или URL (при scrape)")
    scrape: bool = Field(False, description="Скрейпинг URL и вывод CSV")
    output_format: OutputFormat = Field(OutputFormat.TEXT, description="text или json")
    max_games: int = Field(MAX_GAMES, ge=1, description="Лимит C(pool, select)")
    duplicate_policy: DuplicatePolicy = Field(DuplicatePolicy.LAST_WINS)
    pad_width: int = Field(DEFAULT_PAD_WIDTH, ge=1, description="Ширина номера в отчёте")
    verbose: bool = False

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_source(self) -> "GeneratorOptions":
        """Без источника работать не с чем"""
        if not self.source:
            raise ValueError("no input specified")
        return self


# =============================================================================
# TAGGED RESULT
# =============================================================================


@dataclass(frozen=True)
class OptionsResult:
    """Результат валидации: options при успехе, error при ошибке."""

    ok: bool
    options: Optional[GeneratorOptions] = None
    error: str = ""
    show_help: bool = False

    @classmethod
    def success(cls, options: GeneratorOptions) -> "OptionsResult":
        return cls(ok=True, options=options)

    @classmethod
    def failure(cls, error: str, show_help: bool = False) -> "OptionsResult":
        return cls(ok=False, error=error, show_help=show_help)

    @classmethod
    def help(cls) -> "OptionsResult":
        return cls(ok=False, show_help=True)


# =============================================================================
# PARSER
# =============================================================================


class _ArgumentError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    """argparse без sys.exit(): ошибки становятся исключением."""

    def error(self, message):
        raise _ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="lotto",
        description=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("source", nargs="?", help="CSV file (or URL with --scrape)")
    parser.add_argument("-h", "--help", action="store_true", help="Show this help and exit")

    direction = parser.add_mutually_exclusive_group()
    direction.add_argument(
        "-l", "--least", dest="direction", action="store_const", const=Direction.LEAST,
        help="Use least frequently selected numbers (default)",
    )
    direction.add_argument(
        "-m", "--most", dest="direction", action="store_const", const=Direction.MOST,
        help="Use most frequently selected numbers",
    )

    parser.add_argument(
        "-s", "--select", dest="select_size", type=int, default=DEFAULT_SELECT_SIZE,
        help=f"Number of Lotto numbers to select (default {DEFAULT_SELECT_SIZE})",
    )
    parser.add_argument(
        "-c", "--count", "-p", "--pool", dest="pool_size", type=int, default=DEFAULT_POOL_SIZE,
        help=f"Number of frequency numbers to draw from (default {DEFAULT_POOL_SIZE})",
    )
    parser.add_argument(
        "--scrape", action="store_true",
        help="Scrape the URL provided and dump [numb,freq] in CSV format",
    )
    parser.add_argument(
        "--format", dest="output_format", choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value, help="Report format (default text)",
    )
    parser.add_argument(
        "--max-games", dest="max_games", type=int, default=MAX_GAMES,
        help=f"Refuse requests producing more games than this (default {MAX_GAMES})",
    )
    parser.add_argument(
        "--reject-duplicates", action="store_true",
        help="Fail on repeated numbers instead of keeping the last row",
    )
    parser.add_argument(
        "--width", dest="pad_width", type=int, default=DEFAULT_PAD_WIDTH,
        help=f"Pad numbers to this width in the text report (default {DEFAULT_PAD_WIDTH})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _describe(error: ValidationError) -> str:
    """Первая ошибка pydantic в виде 'field: message'"""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", str(error)).removeprefix("Value error, ")
    return f"{location}: {message}" if location else message


def validate_options(argv: Sequence[str]) -> OptionsResult:
    """
    Разбор и валидация аргументов командной строки.

    Args:
        argv: Аргументы без имени программы

    Returns:
        OptionsResult:
        - ok=True, options — готовая конфигурация
        - ok=False, show_help=True, error="" — запрошена справка
        - ok=False, error — конкретная ошибка валидации
    """
    parser = build_parser()
    try:
        args = parser.parse_args(list(argv))
    except _ArgumentError as e:
        return OptionsResult.failure(str(e), show_help=True)

    if args.help:
        return OptionsResult.help()

    try:
        options = GeneratorOptions(
            pool_size=args.pool_size,
            select_size=args.select_size,
            direction=args.direction or DEFAULT_DIRECTION,
            source=args.source,
            scrape=args.scrape,
            output_format=args.output_format,
            max_games=args.max_games,
            duplicate_policy=DuplicatePolicy.REJECT if args.reject_duplicates else DuplicatePolicy.LAST_WINS,
            pad_width=args.pad_width,
            verbose=args.verbose,
        )
    except ValidationError as e:
        return OptionsResult.failure(_describe(e))

    return OptionsResult.success(options)

"""
Reader — Чтение таблицы частот из CSV

Формат файла:

    # datafile.csv
    number, frequency
    1, 345
    2, 340

Ридер убирает пустые строки, комментарии '#' и заголовок, пробелы вокруг
полей. Разбор чисел и проверка формы строки остаются за ядром.
"""

import csv
from pathlib import Path
from typing import Iterable, Iterator

from src.core.domain.frequency import INTEGER_RE


class ReaderError(Exception):
    """Файл не читается как CSV в UTF-8."""

    pass


def _is_header(row: list[str]) -> bool:
    # Строка с хотя бы одним целым полем — данные, даже если невалидные
    return not any(INTEGER_RE.match(field) for field in row)


def rows_from_lines(lines: Iterable[str]) -> Iterator[list[str]]:
    """
    Строки CSV → сырые строки (поля как текст).

    Заголовок распознаётся только в первой значимой строке и только если
    ни одно её поле не является целым числом (например 'number, frequency').
    Строка вида 'x, 10' заголовком не считается и уходит в ядро.
    """
    first = True
    for row in csv.reader(lines, skipinitialspace=True):
        fields = [field.strip() for field in row]
        if not fields or all(not field for field in fields):
            continue
        if fields[0].startswith("#"):
            continue
        if first:
            first = False
            if _is_header(fields):
                continue
        yield fields


def read_frequency_rows(path: str | Path) -> list[list[str]]:
    """
    Чтение CSV файла целиком.

    Raises:
        FileNotFoundError: Файл не найден
        ReaderError: Файл не в UTF-8 или не разбирается как CSV
    """
    with open(path, "r", encoding="utf-8", newline="") as f:
        try:
            return list(rows_from_lines(f))
        except UnicodeDecodeError as e:
            raise ReaderError(f"'{path}' is not valid UTF-8: {e.reason} at byte {e.start}") from e
        except csv.Error as e:
            raise ReaderError(f"'{path}' is not valid CSV: {e}") from e

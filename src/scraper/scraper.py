"""
Scraper — Таблица частот с веб-страницы

Скачивает страницу, собирает пары (number, frequency) из строк HTML-таблиц
и выводит их в CSV формате ядра: 'number,frequency' на строку.

Строка таблицы подходит, если её первые две ячейки — целые числа
(допускаются разделители тысяч: '1,234'). Строки заголовков и прочие
строки пропускаются. Повторный номер оставляет последнее значение,
как и парсер ядра.
"""

import csv
import logging
import re
import sys
from typing import Final, TextIO

import requests
from bs4 import BeautifulSoup

logger = logging.getLogger("lotto.scraper")

DEFAULT_TIMEOUT_SEC: Final[float] = 30.0

_NUMBER_RE = re.compile(r"^\d{1,3}(?:[,\s]\d{3})*$|^\d+$")


class ScrapeError(Exception):
    """Страница не скачана или не содержит таблицы частот."""

    pass


def fetch_page(url: str, timeout: float = DEFAULT_TIMEOUT_SEC) -> str:
    """
    Raises:
        ScrapeError: Сетевая ошибка или HTTP статус >= 400
    """
    logger.debug(f"Fetching {url}")
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise ScrapeError(f"failed to fetch {url}: {e}") from e
    return resp.text


def _cell_to_int(text: str) -> int | None:
    text = text.strip()
    if not _NUMBER_RE.match(text):
        return None
    return int(re.sub(r"[,\s]", "", text))


def parse_frequencies(html: str) -> list[tuple[int, int]]:
    """
    Пары (number, frequency) из всех <tr> страницы в порядке появления.

    Raises:
        ScrapeError: Ни одной подходящей строки
    """
    soup = BeautifulSoup(html, "html.parser")

    by_number: dict[int, int] = {}
    for tr in soup.find_all("tr"):
        cells = tr.find_all(["td", "th"])
        if len(cells) < 2:
            continue
        number = _cell_to_int(cells[0].get_text(strip=True))
        frequency = _cell_to_int(cells[1].get_text(strip=True))
        if number is None or frequency is None:
            continue
        by_number[number] = frequency

    if not by_number:
        raise ScrapeError("no (number, frequency) rows found on page")

    logger.info(f"Scraped {len(by_number)} numbers")
    return list(by_number.items())


def scrape_frequencies_from(url: str, timeout: float = DEFAULT_TIMEOUT_SEC) -> list[tuple[int, int]]:
    return parse_frequencies(fetch_page(url, timeout))


def dump_csv(pairs: list[tuple[int, int]], stream: TextIO | None = None) -> None:
    """Запись пар как 'number,frequency' (без заголовка)"""
    writer = csv.writer(stream or sys.stdout, lineterminator="\n")
    for number, frequency in pairs:
        writer.writerow([number, frequency])

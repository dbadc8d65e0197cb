"""Scraper — сбор таблицы частот с веб-страницы в CSV формат ядра."""

from .scraper import (
    ScrapeError,
    dump_csv,
    fetch_page,
    parse_frequencies,
    scrape_frequencies_from,
)

__all__ = [
    "ScrapeError",
    "dump_csv",
    "fetch_page",
    "parse_frequencies",
    "scrape_frequencies_from",
]

"""
Тесты для скрейпера

Сеть не используется: requests.get подменяется через monkeypatch.
"""

import io

import pytest
import requests

from src.scraper import ScrapeError, dump_csv, fetch_page, parse_frequencies, scrape_frequencies_from
from src.scraper import scraper as scraper_module


FREQUENCY_PAGE = """
<html><body>
<h1>Number frequencies</h1>
<table>
  <tr><th>Number</th><th>Drawn</th><th>Last seen</th></tr>
  <tr><td>1</td><td>345</td><td>2024-01-03</td></tr>
  <tr><td>2</td><td>1,340</td><td>2024-02-10</td></tr>
  <tr><td> 3 </td><td>298</td><td>2023-12-30</td></tr>
  <tr><td>Total</td><td>1983</td></tr>
  <tr><td>4</td></tr>
</table>
</body></html>
"""


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


@pytest.fixture
def fake_get(monkeypatch):
    calls = []

    def install(response=None, exc=None):
        def _get(url, timeout):
            calls.append((url, timeout))
            if exc is not None:
                raise exc
            return response

        monkeypatch.setattr(scraper_module.requests, "get", _get)
        return calls

    return install


class TestParseFrequencies:
    """Разбор HTML"""

    def test_rows_with_two_integers(self) -> None:
        assert parse_frequencies(FREQUENCY_PAGE) == [(1, 345), (2, 1340), (3, 298)]

    def test_repeated_number_last_wins(self) -> None:
        html = "<table><tr><td>5</td><td>1</td></tr><tr><td>5</td><td>9</td></tr></table>"
        assert parse_frequencies(html) == [(5, 9)]

    def test_no_rows(self) -> None:
        with pytest.raises(ScrapeError, match="no \\(number, frequency\\) rows"):
            parse_frequencies("<html><p>nothing here</p></html>")


class TestFetch:
    """Скачивание страницы"""

    def test_fetch_page(self, fake_get) -> None:
        calls = fake_get(FakeResponse("<html/>"))
        assert fetch_page("https://example.com/f", timeout=5) == "<html/>"
        assert calls == [("https://example.com/f", 5)]

    def test_http_error(self, fake_get) -> None:
        fake_get(FakeResponse("", status_code=404))
        with pytest.raises(ScrapeError, match="404"):
            fetch_page("https://example.com/missing")

    def test_connection_error(self, fake_get) -> None:
        fake_get(exc=requests.ConnectionError("refused"))
        with pytest.raises(ScrapeError, match="refused"):
            fetch_page("https://example.com/down")

    def test_scrape_frequencies_from(self, fake_get) -> None:
        fake_get(FakeResponse(FREQUENCY_PAGE))
        assert scrape_frequencies_from("https://example.com/f")[0] == (1, 345)


def test_dump_csv():
    out = io.StringIO()
    dump_csv([(1, 345), (2, 1340)], out)
    assert out.getvalue() == "1,345\n2,1340\n"

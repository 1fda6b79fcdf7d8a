# File: tests/conftest.py
import logging
from typing import Any, Callable, Dict, List, Optional

import pytest

from auction_scout.config import AppConfig, SiteConfig
from auction_scout.crawler.models import PageData
from auction_scout.errors import FetchError
from auction_scout.logger import init_logging, logger as project_logger

SELECTORS: Dict[str, str] = {
    "item": ".auction-item",
    "title": ".auction-title",
    "date": ".auction-date",
    "location": ".auction-location",
    "category": ".auction-category",
    "description": ".auction-description",
    "link": "a",
}


def listing_html(items: List[Dict[str, str]], next_href: Optional[str] = None) -> str:
    """Build a listing page in the layout described by SELECTORS."""
    parts = []
    for item in items:
        fields = "".join(
            f'<span class="auction-{name}">{item[name]}</span>'
            for name in ("title", "date", "location", "category", "description")
            if name in item
        )
        link = f'<a href="{item["href"]}">more</a>' if "href" in item else ""
        parts.append(f'<div class="auction-item">{fields}{link}</div>')
    nav = f'<div class="next-page"><a href="{next_href}">Next</a></div>' if next_href else ""
    return f"<html><body>{''.join(parts)}{nav}</body></html>"


@pytest.fixture()
def make_site() -> Callable[..., SiteConfig]:
    """
    Factory for SiteConfig instances with the default selectors.
    """

    def _make(
        name: str = "Example Auctions",
        url: str = "https://example.com/auctions",
        next_selector: Optional[str] = ".next-page a",
        limit: Optional[int] = None,
        **selectors: str,
    ) -> SiteConfig:
        return SiteConfig(
            name=name,
            url=url,
            selectors={**SELECTORS, **selectors},
            pagination={"next": next_selector, "limit": limit},
        )

    return _make


@pytest.fixture()
def app_config(make_site) -> AppConfig:
    return AppConfig(sites=[make_site()])


class FakeFetcher:
    """Serves pages from a dict; URLs mapped to an exception raise it."""

    def __init__(self, pages: Dict[str, Any]) -> None:
        self.pages = pages
        self.calls: List[str] = []

    async def fetch(self, url: str) -> PageData:
        self.calls.append(url)
        page = self.pages.get(url)
        if page is None:
            raise FetchError(url, f"404, message='Not Found', url='{url}'")
        if isinstance(page, Exception):
            raise page
        return PageData(url, page)


class FakeSpreadsheet:
    """Stands in for gspread.Spreadsheet: values_get / values_append only."""

    def __init__(self, rows: Optional[List[List[str]]] = None) -> None:
        self.rows: List[List[str]] = [list(r) for r in rows or []]
        self.get_calls: List[str] = []
        self.append_calls: List[Dict[str, Any]] = []

    def values_get(self, range_name: str, params: Optional[dict] = None) -> Dict[str, Any]:
        self.get_calls.append(range_name)
        response: Dict[str, Any] = {"range": range_name, "majorDimension": "ROWS"}
        if self.rows:
            response["values"] = [list(r) for r in self.rows]
        return response

    def values_append(self, range_name: str, params: dict, body: dict) -> Dict[str, Any]:
        self.append_calls.append({"range": range_name, "params": params, "body": body})
        self.rows.extend(body["values"])
        return {"updates": {"updatedRows": len(body["values"])}}


@pytest.fixture()
def fake_fetcher_cls():
    return FakeFetcher


@pytest.fixture()
def fake_spreadsheet_cls():
    return FakeSpreadsheet


@pytest.fixture()
def captured_logs(caplog):
    """The project logger does not propagate, so hook caplog's handler onto it."""
    project_logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=project_logger.name)
    try:
        yield caplog
    finally:
        project_logger.removeHandler(caplog.handler)


@pytest.fixture(autouse=True)
def _reset_logging():
    """CliRunner swaps sys.stdout; drop handlers bound to its stream after each test."""
    yield
    init_logging()

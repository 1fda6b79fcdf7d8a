# === FILE: auction_scout/parser/extractor.py ===
"""Turn one auction listing page into :class:`AuctionRecord` rows.

Every element matched by the site's ``item`` selector becomes one record.
Field selectors are scoped to that element; a selector that matches nothing
gives an empty string rather than an error.

Two fields get special treatment:

* category — when the page has none, it is guessed from keywords in the
  title, location and site URL (see :func:`guess_category`).
* link — the ``href`` is made absolute against the site URL; records without
  a link point at the site URL itself.

The pagination link is looked up document-wide and only reported while the
site's page limit has not been reached.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag
from soupsieve import SelectorSyntaxError

from auction_scout.config import SiteConfig
from auction_scout.crawler.models import AuctionRecord, PageResult
from auction_scout.errors import ExtractionError

__all__: Sequence[str] = ("extract_page", "guess_category", "CATEGORY_KEYWORDS")

#: Checked top to bottom, the first group with a hit wins.
CATEGORY_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("property", "estate"), "Property"),
    (("antique", "collectible"), "Antiques"),
    (("jewel", "watch"), "Jewellery"),
    (("car", "vehicle"), "Motors"),
    (("farm", "tractor"), "Agriculture"),
    (("art", "painting"), "Art"),
)
DEFAULT_CATEGORY = "General"


def guess_category(title: str, location: str, url: str) -> str:
    """Infer a category by plain substring search, so "cart" counts as "car"."""
    text = f"{title} {location} {url}".lower()
    for keywords, category in CATEGORY_KEYWORDS:
        if any(word in text for word in keywords):
            return category
    return DEFAULT_CATEGORY


def _text(scope: Tag, selector: str) -> str:
    return "".join(el.get_text() for el in scope.select(selector)).strip()


def _href(scope: Tag, selector: str) -> Optional[str]:
    el = scope.select_one(selector)
    if el is None:
        return None
    href = el.get("href")
    if isinstance(href, list):
        href = " ".join(href)
    return href or None


def _record(item: Tag, site: SiteConfig) -> AuctionRecord:
    sel = site.selectors
    title = _text(item, sel.title)
    location = _text(item, sel.location)
    category = _text(item, sel.category) or guess_category(title, location, site.url)
    href = _href(item, sel.link)
    return AuctionRecord(
        title=title,
        date=_text(item, sel.date),
        location=location,
        category=category,
        description=_text(item, sel.description),
        link=urljoin(site.url, href) if href else site.url,
    )


def _next_url(soup: BeautifulSoup, site: SiteConfig, page: int) -> Optional[str]:
    pagination = site.pagination
    if not pagination.next:
        return None
    if pagination.limit is not None and page >= pagination.limit:
        return None
    href = _href(soup, pagination.next)
    return urljoin(site.url, href) if href else None


def extract_page(html: str, site: SiteConfig, page: int = 1) -> PageResult:
    """Parse *html* fetched as page number *page* of *site*.

    Parameters
    ----------
    html
        Raw markup of the listing page.
    site
        Descriptor providing the selectors, the base URL and pagination rules.
    page
        1-based number of this page; compared with ``pagination.limit`` to
        decide whether a next page is reported.
    """
    soup = BeautifulSoup(html, "html.parser")
    try:
        records = [_record(item, site) for item in soup.select(site.selectors.item)]
        next_url = _next_url(soup, site, page)
    except SelectorSyntaxError as exc:
        raise ExtractionError(site.url, f"bad selector for {site.name}: {exc}") from exc
    except ValueError as exc:
        # urljoin rejects malformed hrefs such as "http://[oops/lot"
        raise ExtractionError(site.url, f"bad link on {site.name}: {exc}") from exc
    return PageResult(records=records, next_url=next_url)

# auction_scout/crawler/walker.py
"""
Site walker: follows "next page" links of one site and collects its records.
"""
from __future__ import annotations

from typing import List, Optional, Protocol

from auction_scout.config import SiteConfig
from auction_scout.crawler.models import AuctionRecord, PageData
from auction_scout.errors import ScrapeError
from auction_scout.logger import logger
from auction_scout.parser.extractor import extract_page


class PageSource(Protocol):
    async def fetch(self, url: str) -> PageData: ...


class SiteWalker:
    """Walks the pages of a site strictly one after another."""

    def __init__(self, fetcher: PageSource) -> None:
        self.fetcher = fetcher

    async def walk(self, site: SiteConfig) -> List[AuctionRecord]:
        """
        Return every record found on the site's pages.

        A failed page ends the walk for this site only; records from the
        pages before it are kept.
        """
        logger.info("Starting: %s", site.name)
        limit = site.pagination.limit
        url: Optional[str] = site.url
        page = 1
        records: List[AuctionRecord] = []

        while url and (limit is None or page <= limit):
            logger.info("Scraping page %d: %s", page, url)
            try:
                fetched = await self.fetcher.fetch(url)
                result = extract_page(fetched.content, site, page)
            except ScrapeError as exc:
                logger.error("Error on %s: %s", url, exc)
                break
            records.extend(result.records)
            url = result.next_url
            page += 1

        logger.info("Found %d items from %s", len(records), site.name)
        return records

# auction_scout/crawler/models.py
"""
Data models for the AuctionScout scraper.
"""
from __future__ import annotations

from dataclasses import astuple, dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class PageData:
    """Holds the URL and decoded HTML of a fetched listing page."""

    url: str
    content: str


@dataclass(slots=True, frozen=True)
class AuctionRecord:
    """One auction row, fields in sheet column order (A–F)."""

    title: str = ""
    date: str = ""
    location: str = ""
    category: str = ""
    description: str = ""
    link: str = ""

    @property
    def key(self) -> str:
        return dedup_key(self.title, self.link)

    def as_row(self) -> List[str]:
        return list(astuple(self))


@dataclass(slots=True)
class PageResult:
    """Records found on one page plus the resolved next-page URL, if any."""

    records: List[AuctionRecord] = field(default_factory=list)
    next_url: Optional[str] = None


def dedup_key(title: str, link: str) -> str:
    """Two rows with the same title and link are the same auction."""
    return f"{title}|{link}"

# File: auction_scout/crawler/__init__.py
"""auction_scout.crawler: Загрузка страниц и обход пагинации сайтов."""

from .fetcher import Fetcher
from .models import AuctionRecord, PageData, PageResult, dedup_key
from .walker import SiteWalker

__all__ = ["Fetcher", "SiteWalker", "AuctionRecord", "PageData", "PageResult", "dedup_key"]

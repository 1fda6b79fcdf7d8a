# File: auction_scout/engine.py
"""auction_scout.engine: Orchestration layer — обход всех сайтов, дедупликация и запись в таблицу."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from auction_scout.config import AppConfig
from auction_scout.crawler.fetcher import Fetcher
from auction_scout.crawler.models import AuctionRecord
from auction_scout.crawler.walker import PageSource, SiteWalker
from auction_scout.logger import logger
from auction_scout.store.sheets import SheetStore

__all__ = ["Engine", "RunSummary"]


@dataclass(slots=True)
class RunSummary:
    """Итог одного запуска."""

    found: Dict[str, int] = field(default_factory=dict)
    new_records: List[AuctionRecord] = field(default_factory=list)
    appended: bool = False

    @property
    def total_found(self) -> int:
        return sum(self.found.values())

    @property
    def new_count(self) -> int:
        return len(self.new_records)


class Engine:
    """Фасад для CLI и тестов: запуск всех сайтов по очереди и единая запись новых строк."""

    def __init__(self, config: AppConfig, store: SheetStore, fetcher: Optional[PageSource] = None) -> None:
        self.config = config
        self.store = store
        self.fetcher = fetcher

    def start(self, *, dry_run: bool = False) -> RunSummary:
        """Синхронная обёртка над run()."""
        return asyncio.run(self.run(dry_run=dry_run))

    async def run(self, *, dry_run: bool = False) -> RunSummary:
        """Ключи загружаются один раз до обхода; запись — одним вызовом после всех сайтов."""
        existing = self.store.load_existing_keys()

        if self.fetcher is not None:
            summary = await self._collect(self.fetcher, existing)
        else:
            async with Fetcher.open(self.config) as fetcher:
                summary = await self._collect(fetcher, existing)

        if not summary.new_records:
            logger.info("No new auctions found.")
            return summary

        if dry_run:
            logger.info("Dry run: %d new auctions not written", summary.new_count)
            return summary

        self.store.append_rows([record.as_row() for record in summary.new_records])
        summary.appended = True
        return summary

    async def _collect(self, fetcher: PageSource, existing: set[str]) -> RunSummary:
        walker = SiteWalker(fetcher)
        summary = RunSummary()
        for site in self.config.sites:
            records = await walker.walk(site)
            summary.found[site.name] = summary.found.get(site.name, 0) + len(records)
            for record in records:
                key = record.key
                if key in existing:
                    continue
                existing.add(key)
                summary.new_records.append(record)
        logger.info(
            "Scraped %d items from %d sites, %d new",
            summary.total_found,
            len(self.config.sites),
            summary.new_count,
        )
        return summary

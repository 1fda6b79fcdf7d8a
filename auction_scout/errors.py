# File: auction_scout/errors.py
"""auction_scout.errors: Иерархия исключений AuctionScout."""

from __future__ import annotations

from typing import Sequence

__all__: Sequence[str] = (
    "AuctionScoutError",
    "ConfigError",
    "ScrapeError",
    "FetchError",
    "ExtractionError",
    "StoreError",
)


class AuctionScoutError(Exception):
    """Базовое исключение проекта."""


class ConfigError(AuctionScoutError):
    """Отсутствуют или некорректны переменные окружения."""


class ScrapeError(AuctionScoutError):
    """Ошибка обработки одной страницы; прерывает обход только текущего сайта."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class FetchError(ScrapeError):
    """Страница не загружена: сетевая ошибка, таймаут или статус не 2xx."""


class ExtractionError(ScrapeError):
    """Не удалось разобрать HTML по селекторам сайта."""


class StoreError(AuctionScoutError):
    """Таблица недоступна или неверно настроена."""

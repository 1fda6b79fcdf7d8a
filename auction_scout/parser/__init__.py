# File: auction_scout/parser/__init__.py
"""auction_scout.parser: Извлечение записей аукционов из HTML по CSS-селекторам."""

from .extractor import extract_page, guess_category

__all__ = ["extract_page", "guess_category"]

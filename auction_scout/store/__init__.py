# File: auction_scout/store/__init__.py
"""auction_scout.store: Хранилище уже записанных аукционов (Google Sheets)."""

from .sheets import HEADER, SHEET_RANGE, SheetStore

__all__ = ["SheetStore", "SHEET_RANGE", "HEADER"]

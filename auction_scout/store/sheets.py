# File: auction_scout/store/sheets.py
"""auction_scout.store.sheets: Google Sheets as the record of already seen auctions.

Layout: sheet ``Sheet1``, columns A–F (title, date, location, category,
description, link), row 1 is a header.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Set

import gspread
from google.auth.exceptions import GoogleAuthError
from google.oauth2.service_account import Credentials
from gspread.exceptions import GSpreadException
from requests.exceptions import RequestException

from auction_scout.config import Settings
from auction_scout.crawler.models import dedup_key
from auction_scout.errors import StoreError
from auction_scout.logger import logger

__all__: Sequence[str] = ("SheetStore", "SHEET_RANGE", "HEADER", "SCOPES")

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
SHEET_RANGE = "Sheet1!A:F"
HEADER = ["Title", "Date", "Location", "Category", "Description", "Link"]


def _cell(row: Sequence[Any], index: int) -> str:
    # the API trims trailing empty cells, so short rows are normal
    if index < len(row) and row[index] is not None:
        return str(row[index])
    return ""


class SheetStore:
    """Reads existing dedup keys and appends new rows to a spreadsheet."""

    def __init__(self, spreadsheet: Any, sheet_range: str = SHEET_RANGE) -> None:
        self.spreadsheet = spreadsheet
        self.sheet_range = sheet_range
        self._needs_header: Optional[bool] = None

    @classmethod
    def connect(cls, settings: Settings) -> "SheetStore":
        """Authorize with the service account and open the spreadsheet.

        Raises StoreError when the credentials are rejected, the sheet
        cannot be opened or the API is unreachable.
        """
        try:
            creds = Credentials.from_service_account_info(settings.service_account_info, scopes=SCOPES)
            client = gspread.authorize(creds)
            spreadsheet = client.open_by_key(settings.sheet_id)
        except (ValueError, GoogleAuthError, GSpreadException, RequestException) as exc:
            raise StoreError(f"Cannot open spreadsheet {settings.sheet_id}: {exc}") from exc
        logger.debug("Opened spreadsheet %s", settings.sheet_id)
        return cls(spreadsheet)

    def load_existing_keys(self) -> Set[str]:
        """Build the key set from every stored row except the header."""
        try:
            response = self.spreadsheet.values_get(self.sheet_range)
        except (GoogleAuthError, GSpreadException, RequestException) as exc:
            raise StoreError(f"Cannot read {self.sheet_range}: {exc}") from exc
        rows: List[List[Any]] = response.get("values", []) or []
        self._needs_header = not rows
        keys = {dedup_key(_cell(row, 0), _cell(row, 5)) for row in rows[1:]}
        logger.info("Loaded %d existing entries from %s", len(keys), self.sheet_range)
        return keys

    def append_rows(self, rows: Sequence[Sequence[str]]) -> int:
        """Append *rows* below the existing content; returns the number of data rows written."""
        if not rows:
            logger.info("Nothing to append")
            return 0
        values = [list(row) for row in rows]
        if self._needs_header:
            values.insert(0, list(HEADER))
        self.spreadsheet.values_append(
            self.sheet_range,
            params={"valueInputOption": "RAW"},
            body={"values": values},
        )
        self._needs_header = False
        logger.info("Added %d new auctions", len(rows))
        return len(rows)

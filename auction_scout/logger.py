# === FILE: auction_scout/logger.py ===
"""Logging for **AuctionScout**.

AuctionScout runs as a periodic job (cron, CI schedule), so the setup is
tuned for that:

* one named logger, :data:`logger`, shared by every module::

      from auction_scout.logger import logger
      logger.info("Starting: %s", site.name)

* console output on stdout, which the scheduler captures;
* an optional log file rotated at midnight, one file per day, two weeks kept
  (``--log-file`` or ``AUCTION_SCOUT_LOG_FILE``);
* HTTP and Google client libraries stay at WARNING unless DEBUG is asked for,
  so a normal run shows only site/page progress and the summary.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Final, Union

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(message)s"
_LOGGER_NAME: Final[str] = "AuctionScout"
_KEEP_DAYS: Final[int] = 14

#: Loggers of the libraries used for fetching and for the spreadsheet.
_NOISY_LIBRARIES: Final[tuple[str, ...]] = ("aiohttp", "urllib3", "google.auth", "gspread")

LOG_FILE_ENV: Final[str] = "AUCTION_SCOUT_LOG_FILE"

_LevelT = Union[int, str]


def _daily_file_handler(file: Path | str, fmt: str) -> TimedRotatingFileHandler:
    path = Path(file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = TimedRotatingFileHandler(
        filename=str(path),
        when="midnight",
        backupCount=_KEEP_DAYS,
        encoding="utf-8",
        delay=True,
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """(Re)build the handlers of the project logger.

    Parameters
    ----------
    level
        Numeric or textual level (e.g. ``"DEBUG"``). At DEBUG the library
        loggers are let through as well.
    log_file
        Daily-rotated logfile. *None* → console only.
    log_format
        Format string for :class:`logging.Formatter`.
    """
    lg = logging.getLogger(_LOGGER_NAME)
    lg.setLevel(level)

    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(log_format))
    lg.addHandler(console)

    if log_file is not None:
        lg.addHandler(_daily_file_handler(log_file, log_format))

    library_level = logging.DEBUG if lg.level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LIBRARIES:
        logging.getLogger(name).setLevel(library_level)

    lg.propagate = False
    return lg


logger: logging.Logger = init_logging()

__all__ = ["logger", "init_logging", "LOG_FILE_ENV"]

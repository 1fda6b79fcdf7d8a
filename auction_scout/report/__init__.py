# File: auction_scout/report/__init__.py
"""auction_scout.report: Выгрузка результатов запуска, используется CLI и тестами."""

from .json_report import records_to_dicts, render_json

__all__ = ["render_json", "records_to_dicts"]

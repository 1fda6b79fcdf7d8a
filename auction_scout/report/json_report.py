# auction_scout/report/json_report.py

"""
Выгрузка найденных за запуск аукционов в JSON.

Используется командой `run --json PATH`, в том числе вместе с `--dry-run`,
чтобы посмотреть новые записи без изменения таблицы.
"""
import json
from dataclasses import asdict
from pathlib import Path
from typing import Iterable

from auction_scout.crawler.models import AuctionRecord


def records_to_dicts(records: Iterable[AuctionRecord]) -> list[dict[str, str]]:
    """Записи в виде словарей с именами колонок."""
    return [asdict(record) for record in records]


def render_json(records: Iterable[AuctionRecord], output_path: Path | str, *, pretty: bool = False) -> Path:
    """
    Сохраняет записи в JSON-файл по указанному пути.

    :param records: новые записи аукционов
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 вместо компактного вывода
    :return: Path сохранённого файла

    Пример:
    ```python
    from auction_scout.report.json_report import render_json
    path = render_json(summary.new_records, 'reports/new.json', pretty=True)
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(records_to_dicts(records), f, ensure_ascii=False, indent=2 if pretty else None)

    return output

# === FILE: auction_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска AuctionScout через командную строку.

Команды:
  run       Обойти сайты из конфига и дописать новые аукционы в таблицу
  config    Показать загруженную конфигурацию сайтов

Общие опции:
  --config PATH       Путь к YAML/JSON со списком сайтов (default: configs/sites.yaml)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл логов, новый файл каждые сутки (env AUCTION_SCOUT_LOG_FILE)
  --log-format FORMAT Формат логирования

Команда run опции:
  --dry-run           Не записывать в таблицу, только показать итог
  --json PATH         Сохранить новые записи в JSON-файл
  --pretty            Преформатировать JSON (отступ 2)

Переменные окружения (обязательны для run):
  SHEET_ID                      ID Google-таблицы
  GOOGLE_SERVICE_ACCOUNT_JSON   JSON-ключ сервисного аккаунта

Пример:
  auction-scout --config configs/sites.yaml run --json reports/new.json --pretty
"""
import os
import sys
from pathlib import Path

import click

from auction_scout import __version__
from auction_scout.config import load_config, load_settings
from auction_scout.engine import Engine
from auction_scout.errors import AuctionScoutError, ConfigError, StoreError
from auction_scout.logger import LOG_FILE_ENV, init_logging
from auction_scout.report.json_report import render_json
from auction_scout.store.sheets import SheetStore

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='AuctionScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default='configs/sites.yaml',
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Путь к файлу со списком сайтов (YAML или JSON).'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    envvar=LOG_FILE_ENV,
    help='Файл логов с ротацией в полночь (только stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд AuctionScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('run', context_settings=CONTEXT_SETTINGS)
@click.option(
    '--dry-run', is_flag=True,
    help='Не записывать новые строки в таблицу'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить новые записи в JSON-файл'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.pass_context
def run(ctx, dry_run, json_output, pretty):
    """Собрать аукционы со всех сайтов и дописать новые в таблицу."""
    cfg = ctx.obj['config']

    # окружение проверяется до любых сетевых вызовов
    try:
        settings = load_settings(os.environ)
    except ConfigError as e:
        print_error(str(e))

    try:
        store = SheetStore.connect(settings)
    except StoreError as e:
        print_error(f'Таблица недоступна: {e}')

    try:
        summary = Engine(cfg, store).start(dry_run=dry_run)
    except StoreError as e:
        print_error(f'Таблица недоступна: {e}')
    except AuctionScoutError as e:
        print_error(f'Ошибка при обходе: {e}')
    except Exception as e:
        print_error(f'Запуск завершился с ошибкой: {e}')

    if json_output:
        try:
            saved = render_json(summary.new_records, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if summary.appended:
        click.secho(f'Added {summary.new_count} new auctions', fg='green')
    elif summary.new_records:
        click.echo(f'Dry run: {summary.new_count} new auctions found')
    else:
        click.echo('No new auctions found.')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()

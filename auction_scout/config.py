# === FILE: auction_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации AuctionScout.

Два источника настроек:
  * файл сайтов (YAML/JSON) — список описаний сайтов с CSS-селекторами
    и правилами пагинации, схема проверяется через Pydantic;
  * переменные окружения — идентификатор таблицы и ключ сервисного
    аккаунта Google, без них запуск невозможен.

Обе части собираются один раз при старте и передаются дальше явно.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import soupsieve
import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from auction_scout import __version__
from auction_scout.errors import ConfigError

__all__ = [
    "SelectorSet",
    "Pagination",
    "SiteConfig",
    "AppConfig",
    "Settings",
    "load_config",
    "load_settings",
    "SHEET_ID_ENV",
    "SERVICE_ACCOUNT_ENV",
]

SHEET_ID_ENV = "SHEET_ID"
SERVICE_ACCOUNT_ENV = "GOOGLE_SERVICE_ACCOUNT_JSON"


class SelectorSet(BaseModel):
    """CSS-селекторы полей. `item` ищется по документу, остальные — внутри item."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    item: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    date: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    link: str = Field(..., min_length=1)

    @field_validator("*")
    def _compile(cls, v: str) -> str:
        try:
            soupsieve.compile(v)
        except soupsieve.SelectorSyntaxError as exc:
            raise ValueError(f"Некорректный CSS-селектор {v!r}: {exc}") from exc
        return v


class Pagination(BaseModel):
    """Правила перехода по страницам. limit=None — без ограничения."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    next: Optional[str] = Field(None, description="Селектор ссылки на следующую страницу.")
    limit: Optional[int] = Field(None, ge=1, description="Максимум страниц на сайт.")

    @field_validator("next")
    def _compile_next(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        try:
            soupsieve.compile(v)
        except soupsieve.SelectorSyntaxError as exc:
            raise ValueError(f"Некорректный CSS-селектор {v!r}: {exc}") from exc
        return v


class SiteConfig(BaseModel):
    """Описание одного сайта-источника."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1, description="Стартовая страница и база для относительных ссылок.")
    selectors: SelectorSet
    pagination: Pagination = Field(default_factory=Pagination)

    @field_validator("url")
    def _check_scheme(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"URL сайта должен начинаться с http(s)://, получено {v!r}")
        return v


class AppConfig(BaseModel):
    """Конфигурация запуска: список сайтов и параметры HTTP-клиента."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    sites: List[SiteConfig] = Field(..., min_length=1)
    timeout: Optional[float] = Field(None, gt=0, description="Таймаут одного запроса (секунд).")
    user_agent: str = Field(f"AuctionScout/{__version__}", min_length=1)


class Settings(BaseModel):
    """Параметры доступа к Google Sheets из окружения."""
    model_config = ConfigDict(frozen=True)

    sheet_id: str = Field(..., min_length=1)
    service_account_info: Dict[str, Any]


_DEFAULT_CFG = Path("configs/sites.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> AppConfig:
    """
    Читает YAML или JSON со списком сайтов и возвращает проверенный AppConfig.
    При отсутствии файла бросает FileNotFoundError, при ошибке схемы — ValidationError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return AppConfig(**data)


def load_settings(environ: Mapping[str, str]) -> Settings:
    """
    Проверяет переменные окружения до любых сетевых вызовов.
    Бросает ConfigError, если чего-то не хватает или ключ не является JSON-объектом.
    """
    sheet_id = (environ.get(SHEET_ID_ENV) or "").strip()
    raw_info = (environ.get(SERVICE_ACCOUNT_ENV) or "").strip()
    missing = [name for name, value in ((SHEET_ID_ENV, sheet_id), (SERVICE_ACCOUNT_ENV, raw_info)) if not value]
    if missing:
        raise ConfigError(f"Missing Google credentials or Sheet ID in environment variables: {', '.join(missing)}")

    try:
        info = json.loads(raw_info)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{SERVICE_ACCOUNT_ENV} is not valid JSON: {exc}") from exc
    if not isinstance(info, dict):
        raise ConfigError(f"{SERVICE_ACCOUNT_ENV} must be a JSON object, got {type(info).__name__}")

    try:
        return Settings(sheet_id=sheet_id, service_account_info=info)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc

# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from auction_scout.config import AppConfig, SiteConfig, load_config, load_settings
from auction_scout.errors import ConfigError

from conftest import SELECTORS


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"sites{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


VALID_YAML = """
sites:
  - name: Example Auctions
    url: https://example.com/auctions
    selectors:
      item: .auction-item
      title: .auction-title
      date: .auction-date
      location: .auction-location
      category: .auction-category
      description: .auction-description
      link: a
    pagination:
      next: .next-page a
      limit: 5
"""

VALID_JSON = json.dumps(
    {"sites": [{"name": "J", "url": "https://j.example/list", "selectors": SELECTORS}]}
)


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        (VALID_YAML, ".yaml", None),
        (VALID_JSON, ".json", None),
        ("{}", ".json", ValidationError),
        ("sites: []", ".yaml", ValidationError),
        ("key: [unclosed", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("sites: []", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, AppConfig)
        assert cfg.sites[0].selectors.item == ".auction-item"


def test_load_config_yaml_values(tmp_path):
    cfg = load_config(write_file(tmp_path, VALID_YAML, ".yml"))
    site = cfg.sites[0]
    assert site.name == "Example Auctions"
    assert site.pagination.next == ".next-page a"
    assert site.pagination.limit == 5
    assert cfg.timeout is None
    assert cfg.user_agent.startswith("AuctionScout/")


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_config(None)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize("field", sorted(SELECTORS))
def test_missing_required_selector_is_fatal(field):
    selectors = {k: v for k, v in SELECTORS.items() if k != field}
    with pytest.raises(ValidationError):
        SiteConfig(name="x", url="https://x.example", selectors=selectors)


def test_invalid_selector_rejected():
    with pytest.raises(ValidationError):
        SiteConfig(name="x", url="https://x.example", selectors={**SELECTORS, "title": "div[["})


def test_pagination_is_optional():
    site = SiteConfig(name="x", url="https://x.example", selectors=SELECTORS)
    assert site.pagination.next is None
    assert site.pagination.limit is None


def test_empty_limit_means_unbounded():
    site = SiteConfig(
        name="x", url="https://x.example", selectors=SELECTORS, pagination={"next": ".n a", "limit": None}
    )
    assert site.pagination.limit is None


def test_zero_limit_rejected():
    with pytest.raises(ValidationError):
        SiteConfig(name="x", url="https://x.example", selectors=SELECTORS, pagination={"next": ".n a", "limit": 0})


def test_site_url_needs_http_scheme():
    with pytest.raises(ValidationError):
        SiteConfig(name="x", url="example.com/list", selectors=SELECTORS)


def test_site_config_is_frozen():
    site = SiteConfig(name="x", url="https://x.example", selectors=SELECTORS)
    with pytest.raises(ValidationError):
        site.name = "y"


# --------------------------------------------------------------------------- #
#                               Environment                                   #
# --------------------------------------------------------------------------- #


def test_load_settings_ok():
    settings = load_settings({"SHEET_ID": "abc", "GOOGLE_SERVICE_ACCOUNT_JSON": '{"type": "service_account"}'})
    assert settings.sheet_id == "abc"
    assert settings.service_account_info == {"type": "service_account"}


@pytest.mark.parametrize(
    "env",
    [
        {},
        {"SHEET_ID": "abc"},
        {"GOOGLE_SERVICE_ACCOUNT_JSON": "{}"},
        {"SHEET_ID": "  ", "GOOGLE_SERVICE_ACCOUNT_JSON": '{"a": 1}'},
    ],
)
def test_load_settings_missing(env):
    with pytest.raises(ConfigError, match="Missing"):
        load_settings(env)


@pytest.mark.parametrize("blob", ["not json", "[1, 2]"])
def test_load_settings_bad_credentials(blob):
    with pytest.raises(ConfigError):
        load_settings({"SHEET_ID": "abc", "GOOGLE_SERVICE_ACCOUNT_JSON": blob})

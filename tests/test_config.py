"""Tests for configuration loading and collaborator wiring."""

from __future__ import annotations

from pathlib import Path

import pytest

from gatewise.config import GatewiseConfig, load_config
from gatewise.config.resolution import build_activator, build_cookie_store
from gatewise.cookies import FirefoxCookieStore, InMemoryCookieStore
from gatewise.exceptions import ConfigError
from tests.conftest import write_yaml


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path)

    assert loaded == GatewiseConfig()
    assert not loaded.has_cookie_source


def test_load_config_explicit_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path, tmp_path / "nope.yaml")


def test_load_config_empty_file(tmp_path: Path) -> None:
    (tmp_path / "gatewise.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == GatewiseConfig()


def test_load_config_resolves_paths_relative_to_config(tmp_path: Path) -> None:
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    config_path = write_yaml(
        config_dir / "gatewise.yaml",
        {
            "breakages": {"tab": ["breakages/tab.yaml"], "webrequest": "breakages/webrequest.json"},
            "dynamic_breakages": {"tab": ["/srv/dynamic/tab.yaml"]},
            "notified_domains_file": "state/notified.json",
            "cookies_db": "profile/cookies.sqlite",
        },
    )

    loaded = load_config(tmp_path, config_path)

    assert loaded.breakages["tab"] == ((config_dir / "breakages/tab.yaml").resolve(),)
    assert loaded.breakages["webrequest"] == ((config_dir / "breakages/webrequest.json").resolve(),)
    assert loaded.dynamic_breakages == {"tab": (Path("/srv/dynamic/tab.yaml"),)}
    assert loaded.notified_domains_file == (config_dir / "state/notified.json").resolve()
    assert loaded.cookies_db == (config_dir / "profile/cookies.sqlite").resolve()
    assert loaded.has_cookie_source


@pytest.mark.parametrize(
    ("content", "match"),
    [
        ("- a\n- b\n", "must be a YAML mapping"),
        ("breakages: [unclosed\n", "Invalid YAML"),
        ("profile: strict\n", "Unknown config keys"),
        ("breakages: [tab.yaml]\n", "breakages must be a mapping"),
        ("breakages: {popup: [x.yaml]}\n", "unknown breakage kinds"),
        ("dynamic_breakages: {tab: [1]}\n", "dynamic_breakages.tab must be a list of strings"),
        ("cookies_db: 3\n", "cookies_db must be a non-empty string path"),
        ("notified_domains_file: ''\n", "notified_domains_file"),
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, content: str, match: str) -> None:
    config_path = tmp_path / "gatewise.yaml"
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=match):
        load_config(tmp_path)


def test_build_cookie_store_variants(tmp_path: Path) -> None:
    cookies_file = write_yaml(tmp_path / "cookies.yaml", [{"name": "s", "value": "v", "domain": "example.com"}])

    assert build_cookie_store(GatewiseConfig()) is None
    assert isinstance(build_cookie_store(GatewiseConfig(cookies_db=tmp_path / "c.sqlite")), FirefoxCookieStore)
    assert isinstance(build_cookie_store(GatewiseConfig(cookies_file=cookies_file)), InMemoryCookieStore)

    with pytest.raises(ConfigError, match="Cookie source conflict"):
        build_cookie_store(GatewiseConfig(cookies_db=tmp_path / "c.sqlite", cookies_file=cookies_file))


@pytest.mark.asyncio
async def test_build_activator_from_config(tmp_path: Path) -> None:
    write_yaml(tmp_path / "tab.yaml", [{"domains": ["example.com"], "message": "hello"}])
    write_yaml(
        tmp_path / "gatewise.yaml",
        {"breakages": {"tab": ["tab.yaml"]}, "notified_domains_file": "notified.json"},
    )

    activator = build_activator(load_config(tmp_path))
    breakage = await activator.maybe_notify("https://example.com/")

    assert breakage is not None
    assert breakage.message == "hello"
    assert (tmp_path / "notified.json").exists()

import pytest

from whitelist_bot.config.core import Core
from whitelist_bot.config.loader import load_raw_config
from whitelist_bot.config.store import Store


def test_core_defaults_from_environment(monkeypatch):
    monkeypatch.setenv("GUILD_ID", "555")
    monkeypatch.delenv("ADMIN_ROLE_ID", raising=False)

    core = Core({})

    assert core.CLIENT_ID == 1234
    assert core.GUILD_ID == 555
    assert core.ADMIN_ROLE_ID is None
    assert core.PAGE_SIZE == 20
    assert core.CONFIRM_TIMEOUT == 30.0


def test_core_toml_overrides_environment(monkeypatch):
    monkeypatch.setenv("PAGE_SIZE", "50")
    cfg = {"discord": {"page_size": 10, "admin_role_id": 77}}

    core = Core(cfg)

    assert core.PAGE_SIZE == 10
    assert core.ADMIN_ROLE_ID == 77


def test_core_requires_token(monkeypatch):
    monkeypatch.delenv("DISCORD_TOKEN", raising=False)

    with pytest.raises(ValueError, match="DISCORD_TOKEN"):
        Core({})


def test_store_defaults(monkeypatch):
    for name in ("GITHUB_OWNER", "GITHUB_REPO", "WHITELIST_FILE", "GITHUB_BRANCH", "CACHE_TTL"):
        monkeypatch.delenv(name, raising=False)

    store = Store({})

    assert (store.GITHUB_OWNER, store.GITHUB_REPO, store.WHITELIST_FILE) == (
        "ZenixWRK",
        "Zenix-Plugin-Whitelists",
        "MeshLab.json",
    )
    assert store.GITHUB_BRANCH is None
    assert store.CACHE_TTL == 60.0


def test_store_requires_token(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)

    with pytest.raises(ValueError, match="GITHUB_TOKEN"):
        Store({})


def test_load_raw_config_missing_file(tmp_path):
    assert load_raw_config(tmp_path / "absent.toml") == {}


def test_load_raw_config_reads_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[whitelist_bot.store]\nrepo = "Lists"\n', encoding="utf-8")

    assert load_raw_config(path) == {"store": {"repo": "Lists"}}


def test_load_raw_config_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "bot.toml"
    path.write_text('[whitelist_bot.discord]\npage_size = 5\n[other]\nx = 1\n', encoding="utf-8")
    monkeypatch.setenv("WHITELIST_BOT_CONFIG", str(path))

    section = load_raw_config()

    assert section == {"discord": {"page_size": 5}}
    assert Core(section).PAGE_SIZE == 5


def test_load_raw_config_rejects_non_table_section(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('whitelist_bot = "oops"\n', encoding="utf-8")

    with pytest.raises(ValueError):
        load_raw_config(path)

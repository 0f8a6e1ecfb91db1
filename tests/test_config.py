from __future__ import annotations

import sys
from pathlib import Path

import pytest
from dotenv import dotenv_values

from lemonsqueezy.adapters.http_client import build_async_client
from lemonsqueezy.core import config as config_module
from lemonsqueezy.core.config import (
    ClientSettings,
    Config,
    get_config,
    get_default_settings,
    get_user_config_dir,
    lemon_squeezy_setup,
    use_config,
    write_user_env_vars,
)


def test_get_config_is_none_before_setup() -> None:
    assert get_config() is None


def test_setup_returns_stored_config() -> None:
    def on_error(error: Exception) -> None:
        pass

    config = lemon_squeezy_setup(api_key="key-1", on_error=on_error)

    assert config.api_key == "key-1"
    assert config.on_error is on_error
    assert get_config() is config


def test_setup_replaces_whole_config() -> None:
    lemon_squeezy_setup(api_key="key-1", on_error=print)
    lemon_squeezy_setup(api_key="key-2")

    config = get_config()
    assert config is not None
    assert config.api_key == "key-2"
    assert config.on_error is None


def test_setup_accepts_missing_key() -> None:
    config = lemon_squeezy_setup()
    assert config.api_key is None


def test_scoped_config_overrides_global_only_inside_context() -> None:
    lemon_squeezy_setup(api_key="global")

    with use_config(Config(api_key="scoped")) as scoped:
        assert get_config() is scoped

    config = get_config()
    assert config is not None
    assert config.api_key == "global"


def test_settings_read_prefixed_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LEMONSQUEEZY_API_KEY", "from-env")
    monkeypatch.setenv("LEMONSQUEEZY_HTTP_TIMEOUT_SECONDS", "5")

    settings = ClientSettings()

    assert settings.api_key == "from-env"
    assert settings.http_timeout_seconds == 5.0
    assert settings.to_config().api_key == "from-env"


def test_write_user_env_vars_merges(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config_module, "get_user_config_dir", lambda: tmp_path / "lemonsqueezy")

    write_user_env_vars({"LEMONSQUEEZY_API_KEY": "first", "OTHER": "x"})
    env_path = write_user_env_vars({"LEMONSQUEEZY_API_KEY": "second"})

    assert env_path == tmp_path / "lemonsqueezy" / ".env"
    assert dotenv_values(env_path) == {"LEMONSQUEEZY_API_KEY": "second", "OTHER": "x"}


def test_write_user_env_vars_keeps_existing_lines(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setattr(config_module, "get_user_config_dir", lambda: tmp_path)
    env_path = tmp_path / ".env"
    env_path.write_text(
        "# mis ajustes\nthis line is not valid\nLEMONSQUEEZY_USER_AGENT=custom/1.0\n",
        encoding="utf-8",
    )

    write_user_env_vars({"LEMONSQUEEZY_API_KEY": "secret", "IGNORED": None})

    text = env_path.read_text(encoding="utf-8")
    assert "# mis ajustes" in text
    assert "this line is not valid" in text
    assert "IGNORED" not in text
    values = dotenv_values(env_path)
    assert values["LEMONSQUEEZY_USER_AGENT"] == "custom/1.0"
    assert values["LEMONSQUEEZY_API_KEY"] == "secret"


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG solo aplica en Linux")
def test_user_config_dir_follows_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / "lemonsqueezy"


def test_default_settings_are_read_once(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LEMONSQUEEZY_HTTP_TIMEOUT_SECONDS", "5")
    first = build_async_client()

    # Un valor inválido posterior no afecta a los clientes nuevos: el entorno ya se leyó.
    monkeypatch.setenv("LEMONSQUEEZY_HTTP_TIMEOUT_SECONDS", "not-a-number")
    second = build_async_client()

    assert get_default_settings() is get_default_settings()
    assert first.timeout.read == 5.0
    assert second.timeout.read == 5.0

"""Configuración del cliente.

Responsabilidad:
- `Config`: la credencial activa (API key) y el hook `on_error`.
- Un store KV de proceso donde `lemon_squeezy_setup` guarda la configuración.
- `ClientSettings` (pydantic-settings) para timeouts/User-Agent y para la CLI.

Reglas:
- `lemon_squeezy_setup` reemplaza la configuración completa (no hace merge).
- La última escritura gana; cada request lee la configuración una sola vez.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from functools import lru_cache
from pathlib import Path
from typing import Any

import typer
from dotenv import set_key
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "lemonsqueezy"
API_BASE_URL = "https://api.lemonsqueezy.com"
CONFIG_KEY = "__config__"

_KV: dict[str, Any] = {}


def get_kv(key: str) -> Any:
    return _KV.get(key)


def set_kv(key: str, value: Any) -> None:
    _KV[key] = value


class Config(BaseModel):
    """Configuración activa de una llamada.

    `api_key` puede faltar: los endpoints de licencias no la necesitan.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = Field(
        default=None,
        description="API key de Lemon Squeezy (Bearer).",
    )
    on_error: Callable[[Exception], Any] | None = Field(
        default=None,
        description="Callback invocado una vez por cada error devuelto en el envelope.",
    )


_scoped_config: ContextVar[Config | None] = ContextVar("lemonsqueezy_config", default=None)


def lemon_squeezy_setup(
    api_key: str | None = None,
    on_error: Callable[[Exception], Any] | None = None,
) -> Config:
    """Instala la configuración global y la devuelve.

    No valida nada: una API key ausente es un estado válido.
    """

    config = Config(api_key=api_key, on_error=on_error)
    set_kv(CONFIG_KEY, config)
    return config


def get_config() -> Config | None:
    """Configuración vigente: la del contexto actual o, si no hay, la global."""

    scoped = _scoped_config.get()
    if scoped is not None:
        return scoped
    return get_kv(CONFIG_KEY)


@contextmanager
def use_config(config: Config) -> Iterator[Config]:
    """Aplica `config` solo dentro del contexto actual (task/thread)."""

    token = _scoped_config.set(config)
    try:
        yield config
    finally:
        _scoped_config.reset(token)


def get_user_config_dir() -> Path:
    """`~/.config/lemonsqueezy` o el equivalente de la plataforma (resuelto por click)."""

    return Path(typer.get_app_dir(APP_NAME))


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: Mapping[str, str | None]) -> Path:
    """Actualiza solo las keys dadas en el .env de usuario.

    python-dotenv reescribe línea a línea: comentarios, otras variables y
    líneas mal formadas del archivo existente se conservan tal cual.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    if not env_path.exists():
        env_path.write_text("# lemonsqueezy user config\n", encoding="utf-8")

    for key, value in values.items():
        if value is not None:
            set_key(env_path, key, value, quote_mode="never")
    return env_path


class ClientSettings(BaseSettings):
    """Ajustes de transporte y de la CLI.

    La librería nunca lee la API key del entorno por su cuenta: solo la CLI
    (o quien llame a `to_config`) la usa.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEMONSQUEEZY_",
        extra="ignore",
        case_sensitive=False,
        # Si una variable está en ambos, gana el .env de usuario (el último).
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="API key de Lemon Squeezy (solo CLI / to_config).",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="lemonsqueezy-python/0.1",
        min_length=1,
        description="User-Agent enviado en cada request.",
    )

    def to_config(self, on_error: Callable[[Exception], Any] | None = None) -> Config:
        return Config(api_key=self.api_key, on_error=on_error)


@lru_cache(maxsize=1)
def get_default_settings() -> ClientSettings:
    """`ClientSettings()` leído una sola vez por proceso (entorno + archivos .env)."""

    return ClientSettings()

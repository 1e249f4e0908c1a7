"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT_URL = "https://jsonplaceholder.typicode.com/posts"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "postboard"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "postboard"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "postboard"
    return Path.home() / ".config" / "postboard"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.

    No es un singleton: la raíz de composición crea una instancia y la pasa.
    """

    model_config = SettingsConfigDict(
        env_prefix="POSTBOARD_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    endpoint_url: str = Field(
        default=DEFAULT_ENDPOINT_URL,
        description="URL del recurso remoto (array JSON de posts).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="postboard/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para peticiones salientes.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING...).",
    )
    log_json: bool = Field(
        default=False,
        description="Emitir logs como JSON (útil en pipelines/CI).",
    )

"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los flags de la CLI siempre tienen prioridad; esto solo aporta defaults.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import DEFAULT_MESSAGE, DEFAULT_REPEAT_INTERVAL_SECONDS
from core.logger import LogLevel


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "remind"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "remind"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "remind"
    return Path.home() / ".config" / "remind"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para la CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="REMIND_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_message: str = Field(
        default=DEFAULT_MESSAGE,
        min_length=1,
        description="Mensaje cuando no se pasa MESSAGE por la CLI.",
    )
    repeat_interval_seconds: float = Field(
        default=DEFAULT_REPEAT_INTERVAL_SECONDS,
        gt=0,
        description="Segundos entre avisos repetidos.",
    )
    clear_screen: bool = Field(
        default=True,
        description="Limpiar la terminal antes del primer aviso.",
    )
    strict_parsing: bool = Field(
        default=False,
        description="Rechazar dígitos finales sin unidad (p.ej. '2h30').",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Nivel de logs en stderr.",
    )

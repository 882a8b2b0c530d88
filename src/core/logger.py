"""Configuración de logs (loguru).

Por qué un módulo propio:
- La salida de usuario (confirmación, avisos) va por stdout vía Rich; los logs
  van siempre a stderr y nunca se mezclan con ella.
- Un único punto de configuración para CLI y tests.
"""

from __future__ import annotations

import sys
from typing import Literal

from loguru import logger

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level:<8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(level: LogLevel | str = "WARNING") -> None:
    """Reemplaza los sinks de loguru por uno solo en stderr."""

    logger.remove()
    logger.add(
        sys.stderr,
        level=str(level).upper(),
        format=CONSOLE_FORMAT,
        colorize=None,
    )


__all__ = ["LogLevel", "logger", "setup_logging"]

"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a la CLI ni a la terminal.
- Los modelos son inmutables (`frozen`): se crean una vez al arrancar y nadie
  los modifica después.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# Ancho del entero de la implementación de referencia (u8).
MAX_UNIT_VALUE = 255

DEFAULT_MESSAGE = "Time is up!"
DEFAULT_REPEAT_INTERVAL_SECONDS = 30.0


class Duration(BaseModel):
    """Offset relativo (horas + minutos) desde "ahora".

    Ambos a cero es válido: el recordatorio salta de inmediato.
    """

    model_config = ConfigDict(frozen=True)

    hours: int = Field(
        default=0,
        ge=0,
        le=MAX_UNIT_VALUE,
        description="Horas a esperar.",
    )
    minutes: int = Field(
        default=0,
        ge=0,
        le=MAX_UNIT_VALUE,
        description="Minutos a esperar (normalmente 0-59, pero no se normaliza).",
    )

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60

    def describe(self) -> str:
        return f"{self.hours} hour(s) and {self.minutes} minute(s)"


class ReminderConfig(BaseModel):
    """Configuración de un recordatorio, construida una sola vez por la CLI."""

    model_config = ConfigDict(frozen=True)

    delta: Duration = Field(
        ...,
        description="Tiempo a esperar antes del primer aviso.",
    )
    once: bool = Field(
        default=False,
        description="Si es True, se avisa una sola vez y el proceso termina.",
    )
    message: str = Field(
        default=DEFAULT_MESSAGE,
        description="Texto del aviso.",
    )
    repeat_interval_seconds: float = Field(
        default=DEFAULT_REPEAT_INTERVAL_SECONDS,
        gt=0,
        description="Segundos entre avisos cuando `once` es False.",
    )
    clear_screen: bool = Field(
        default=True,
        description="Limpiar la terminal antes del primer aviso.",
    )


class ReminderState(str, Enum):
    """Estados del ciclo de vida de un recordatorio."""

    IDLE = "idle"
    WAITING = "waiting"
    ALERTING = "alerting"
    DONE = "done"

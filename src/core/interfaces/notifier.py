"""Contrato de salida del recordatorio.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El bucle de avisos no sabe si escribe en una terminal, en un test o en
  otra salida; solo llama a estos tres métodos.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Duration


@runtime_checkable
class Notifier(Protocol):
    """Contrato mínimo para emitir los avisos."""

    def announce(self, delta: Duration) -> None:
        """Confirma al usuario cuánto se va a esperar."""

        ...

    def clear(self) -> None:
        """Limpia la pantalla antes del primer aviso."""

        ...

    def alert(self, message: str) -> None:
        """Emite un ciclo de aviso (campana + mensaje)."""

        ...

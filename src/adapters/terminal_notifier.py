"""Notifier de terminal (Rich).

Por qué escribir los códigos de control a mano:
- Rich descarta los segmentos de control cuando la salida no es una TTY y
  elimina el BEL del texto; aquí se quieren siempre (pipes, `tee`, tests).
- El mensaje del usuario se escribe tal cual, sin interpretar markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.control import Control

from core.domain.models import Duration

CLEAR_AND_HOME = str(Control.clear()) + str(Control.home())
BELL = str(Control.bell())


class TerminalNotifier:
    """Implementa `core.interfaces.notifier.Notifier` sobre una consola Rich."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def announce(self, delta: Duration) -> None:
        self._console.print(f"Remind in {delta.describe()}.", markup=False, highlight=False)

    def clear(self) -> None:
        self._write(CLEAR_AND_HOME)

    def alert(self, message: str) -> None:
        self._write(f"{BELL}{message}\n")

    def _write(self, text: str) -> None:
        stream = self._console.file
        stream.write(text)
        stream.flush()

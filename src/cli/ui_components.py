"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La salida de avisos vive en `adapters.terminal_notifier`; aquí solo van los
  mensajes de la propia CLI.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text


def print_error(console: Console, message: str) -> None:
    """Imprime un error de la CLI (normalmente en la consola de stderr)."""

    text = Text("Error: ", style="bold red")
    text.append(message)
    console.print(text)

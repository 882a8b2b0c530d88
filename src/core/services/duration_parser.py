"""Parser de duraciones compactas (`2h30m`, `45m`, `1h`).

Por qué un scanner a mano y no una regex:
- El lenguaje es mínimo (dígitos + marcadores `h`/`m`) y los errores tienen
  que distinguir horas, minutos y sintaxis.
- Es una función pura: se testea sin I/O ni esperas.

Comportamiento heredado que se mantiene:
- Los dígitos finales sin unidad se descartan (`"2h30"` -> 2h 0m). Con
  `strict=True` se rechazan.
- Las unidades pueden repetirse; gana la última.
"""

from __future__ import annotations

from core.domain.models import MAX_UNIT_VALUE, Duration

INVALID_HOURS = "Invalid hours"
INVALID_MINUTES = "Invalid minutes"
INVALID_SYNTAX = "Invalid syntax, ex: 2h30m"


class ParseError(ValueError):
    """La cadena de duración no es válida."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _to_unit(number: str, error: str) -> int:
    # Solo dígitos ASCII, igual que el parser de enteros sin signo original.
    if not number or not number.isascii() or not number.isdigit():
        raise ParseError(error)
    # Sin ceros a la izquierda; más de 3 cifras ya no cabe y evita int() enormes.
    digits = number.lstrip("0") or "0"
    if len(digits) > 3 or int(digits) > MAX_UNIT_VALUE:
        raise ParseError(error)
    return int(digits)


def parse_duration(text: str, *, strict: bool = False) -> Duration:
    """Convierte `text` en un `Duration`.

    Raises:
        ParseError: con "Invalid hours", "Invalid minutes" o
            "Invalid syntax, ex: 2h30m".
    """

    hours = 0
    minutes = 0
    number = ""

    for char in text:
        if char == "h":
            hours = _to_unit(number, INVALID_HOURS)
            number = ""
        elif char == "m":
            minutes = _to_unit(number, INVALID_MINUTES)
            number = ""
        elif char.isnumeric():
            number += char
        else:
            raise ParseError(INVALID_SYNTAX)

    if number and strict:
        raise ParseError(INVALID_SYNTAX)

    return Duration(hours=hours, minutes=minutes)

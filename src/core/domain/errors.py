"""Errores del dominio.

Por qué una jerarquía pequeña:
- La CLI solo necesita saber "algo falló, este es el mensaje".
- Los tests pueden comprobar la clase exacta del fallo.
"""

from __future__ import annotations


class ServerListError(Exception):
    """Base error for every failure the CLI reports to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportError(ServerListError):
    """Network failure or non-2xx HTTP response."""


class DecodeError(ServerListError):
    """Body is not JSON, or not an object with a `list` array of objects."""


class UnknownKeyError(ServerListError):
    """The requested field is absent from every record."""

    def __init__(self, key: str) -> None:
        super().__init__(f"invalid key: {key}")
        self.key = key

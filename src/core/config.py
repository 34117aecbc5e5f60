"""Configuración del Core.

Por qué aquí:
- Centraliza los defaults (pydantic-settings) sin contaminar la CLI.
- Permite que el adaptador HTTP lea timeout/User-Agent de forma consistente.

No se persiste nada: no se lee ni escribe ningún `.env`, solo variables de
entorno del proceso con prefijo `SERVERLIST_`.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LIST_ADDRESS = "https://servers.minetest.net/list"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin código de parseo.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="SERVERLIST_",
        extra="ignore",
        case_sensitive=False,
    )

    list_address: str = Field(
        default=DEFAULT_LIST_ADDRESS,
        min_length=1,
        description="URL of the JSON server list.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="serverlist/0.1",
        min_length=1,
        description="User-Agent sent with the list request.",
    )

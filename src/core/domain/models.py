"""Modelos del dominio (Pydantic v2).

Por qué Pydantic aquí:
- La forma del envoltorio (`{"list": [{...}, ...]}`) se valida en el borde,
  así el proyector no vuelve a comprobar tipos.
- Los registros siguen siendo de tipado laxo: la lista no tiene esquema fijo.

Nota:
- Estos modelos describen *qué* es un directorio, no *cómo* se obtiene.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

Record = Dict[str, Any]


class ServerDirectory(BaseModel):
    """Ordered sequence of server records returned by one fetch."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    servers: List[Record] = Field(
        ...,
        alias="list",
        description="Server entries, in the order the remote list returned them.",
    )

    def __len__(self) -> int:
        return len(self.servers)


@dataclass(frozen=True)
class ProjectedLine:
    """One output row: `address:port` label plus the rendered value."""

    label: str
    value: str

    def format(self) -> str:
        return f"{self.label}\t{self.value}"

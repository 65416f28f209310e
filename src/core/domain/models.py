"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los modelos son inmutables (`frozen`): una petición o un resultado no cambian
  después de creados.

Nota:
- `celsius_text` es el texto tal cual lo devuelve el servicio remoto. No se
  convierte a número: el formato del payload no está garantizado.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


def is_blank(value: str) -> bool:
    return not value or value.isspace()


class ConversionRequest(BaseModel):
    """Una petición de conversión (una por envío del usuario)."""

    model_config = ConfigDict(frozen=True)

    fahrenheit_value: str = Field(
        ...,
        min_length=1,
        description="Valor en Fahrenheit tal cual lo escribió el usuario (sin validar como número).",
    )


class ConversionResult(BaseModel):
    """Resultado de una conversión exitosa."""

    model_config = ConfigDict(frozen=True)

    celsius_text: str = Field(
        ...,
        description="Payload textual devuelto por el servicio, sin redondeo ni formato.",
    )

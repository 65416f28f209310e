"""Contratos de conversión.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el cliente SOAP o el gateway por dobles en tests sin
  acoplar el Core a implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ConversionResult


@runtime_checkable
class TemperatureConversionClient(Protocol):
    """Cliente remoto bloqueante.

    Reglas de diseño:
    - `fahrenheit_to_celsius` es síncrono: hace una llamada HTTP bloqueante.
    - Devuelve el texto crudo del servicio; cualquier fallo es `SoapCallError`.
    """

    def fahrenheit_to_celsius(self, fahrenheit_value: str) -> str:
        ...


@runtime_checkable
class ConversionGateway(Protocol):
    """Puerta de acceso asíncrona usada por la operación de conversión."""

    async def convert_fahrenheit(self, fahrenheit_value: str) -> ConversionResult:
        """Convierte sin bloquear el event loop y envuelve el texto en un resultado."""

        ...

"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.conversion import ConversionGateway, TemperatureConversionClient

__all__ = [
    "ConversionGateway",
    "TemperatureConversionClient",
]

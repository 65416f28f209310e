"""Gateway asíncrono sobre el cliente SOAP bloqueante.

Por qué un gateway:
- El cliente SOAP bloquea; aquí se despacha a un pool de hilos reservado para
  I/O para que el event loop (equivalente al hilo de UI) nunca se bloquee.
- Convierte el texto crudo en un `ConversionResult` tipado.

Los errores del cliente se propagan sin cambios: no hay reintentos, timeouts
adicionales ni fallback en esta capa.
"""

from __future__ import annotations

import asyncio
from concurrent.futures import Executor

from core.domain.models import ConversionResult
from core.interfaces.conversion import ConversionGateway, TemperatureConversionClient


class SoapConversionGateway(ConversionGateway):
    def __init__(self, client: TemperatureConversionClient, executor: Executor) -> None:
        self._client = client
        self._executor = executor

    async def convert_fahrenheit(self, fahrenheit_value: str) -> ConversionResult:
        # Si la tarea se cancela, el hilo termina su llamada y el resultado se descarta.
        loop = asyncio.get_running_loop()
        celsius_text = await loop.run_in_executor(
            self._executor,
            self._client.fahrenheit_to_celsius,
            fahrenheit_value,
        )
        return ConversionResult(celsius_text=celsius_text)

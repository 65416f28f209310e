"""Single entry point between presentation and data access.

The operation only rejects blank input and forwards the value. It does not
parse, round or otherwise reinterpret anything the remote service returns.
"""

from __future__ import annotations

from core.domain.exceptions import BlankInputError
from core.domain.models import ConversionRequest, ConversionResult, is_blank
from core.interfaces.conversion import ConversionGateway


class ConvertTemperatureOperation:
    """Fahrenheit → Celsius through a `ConversionGateway`."""

    def __init__(self, gateway: ConversionGateway) -> None:
        self._gateway = gateway

    async def __call__(self, fahrenheit_value: str) -> ConversionResult:
        if is_blank(fahrenheit_value):
            raise BlankInputError()
        request = ConversionRequest(fahrenheit_value=fahrenheit_value)
        return await self._gateway.convert_fahrenheit(request.fahrenheit_value)

"""Wiring explícito de dependencias.

Por qué una fábrica y no un contenedor DI:
- Solo hay cuatro piezas; el grafo se lee de arriba abajo en una función.
- En tests se construye cada pieza a mano con dobles.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from adapters.conversion_gateway import SoapConversionGateway
from adapters.soap_client import SoapConversionClient
from core.config import AppSettings
from core.services.conversion_view_model import ConversionViewModel
from core.services.convert_temperature import ConvertTemperatureOperation


@dataclass
class AppContainer:
    """Grafo completo: cliente → gateway → operación → view model."""

    settings: AppSettings
    executor: ThreadPoolExecutor
    client: SoapConversionClient
    gateway: SoapConversionGateway
    operation: ConvertTemperatureOperation
    view_model: ConversionViewModel

    def close(self) -> None:
        """Cierra el view model y libera el pool sin esperar llamadas en curso."""

        self.view_model.close()
        self.executor.shutdown(wait=False, cancel_futures=True)

    def __enter__(self) -> "AppContainer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def build_container(
    settings: AppSettings | None = None,
    *,
    client: SoapConversionClient | None = None,
) -> AppContainer:
    settings = settings or AppSettings()
    executor = ThreadPoolExecutor(
        max_workers=settings.blocking_io_workers,
        thread_name_prefix="soap-io",
    )
    client = client or SoapConversionClient(settings)
    gateway = SoapConversionGateway(client, executor)
    operation = ConvertTemperatureOperation(gateway)
    return AppContainer(
        settings=settings,
        executor=executor,
        client=client,
        gateway=gateway,
        operation=operation,
        view_model=ConversionViewModel(operation),
    )

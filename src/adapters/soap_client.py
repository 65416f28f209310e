"""Cliente SOAP: servicio público TempConvert (w3schools).

Fase única:
- Una operación fija (`FahrenheitToCelsius`) contra un endpoint fijo.
- Devuelve el texto crudo del resultado; no interpreta el valor.
- Sin reintentos ni caché: una petición HTTP por invocación.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_sync_client
from adapters.soap_envelope import build_request_envelope, parse_response, soap12_content_type
from core.config import AppSettings
from core.domain.exceptions import SoapCallError
from core.interfaces.conversion import TemperatureConversionClient

_LOGGER = logging.getLogger(__name__)

SERVICE_URL = "https://www.w3schools.com/xml/tempconvert.asmx"
SERVICE_NAMESPACE = "https://www.w3schools.com/xml/"
METHOD_NAME = "FahrenheitToCelsius"
SOAP_ACTION = f"{SERVICE_NAMESPACE}{METHOD_NAME}"
RESULT_ELEMENT = f"{METHOD_NAME}Result"


class SoapConversionClient(TemperatureConversionClient):
    """Llama a `FahrenheitToCelsius` y devuelve el payload textual."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def fahrenheit_to_celsius(self, fahrenheit_value: str) -> str:
        try:
            payload = build_request_envelope(
                namespace=SERVICE_NAMESPACE,
                method=METHOD_NAME,
                params={"Fahrenheit": fahrenheit_value},
            )
        except SoapCallError as exc:
            _LOGGER.warning("SOAP request for %s could not be built: %s", METHOD_NAME, exc)
            raise
        headers = {"Content-Type": soap12_content_type(SOAP_ACTION)}

        _LOGGER.debug("POST %s action=%s Fahrenheit=%r", SERVICE_URL, SOAP_ACTION, fahrenheit_value)

        # Un cliente por llamada: no se garantiza reutilizar conexiones.
        try:
            with build_sync_client(self._settings, transport=self._transport) as client:
                response = client.post(SERVICE_URL, content=payload, headers=headers)
        except httpx.HTTPError as exc:
            _LOGGER.warning("SOAP call to %s failed: %r", SERVICE_URL, exc)
            raise SoapCallError(str(exc) or exc.__class__.__name__) from exc

        try:
            text = parse_response(
                response.content,
                namespace=SERVICE_NAMESPACE,
                result_element=RESULT_ELEMENT,
                status_code=response.status_code,
            )
        except SoapCallError as exc:
            _LOGGER.warning(
                "SOAP call to %s returned an error (status=%s, fault=%s): %s",
                SERVICE_URL,
                exc.status_code,
                exc.fault_code,
                exc,
            )
            raise

        _LOGGER.debug("%s -> %r", METHOD_NAME, text)
        return text

"""SOAP 1.2 envelope codec.

Builds request envelopes in the .NET document/literal convention (operation
element and its parameters share the service namespace as default namespace)
and extracts the result text from a response envelope.

The result text is returned exactly as it appears inside the result element:
no trimming and no numeric coercion.
"""

from __future__ import annotations

from typing import Mapping
from xml.etree import ElementTree
from xml.sax.saxutils import escape, quoteattr

from core.domain.exceptions import SoapCallError

SOAP12_ENVELOPE_NS = "http://www.w3.org/2003/05/soap-envelope"
SOAP12_CONTENT_TYPE = "application/soap+xml; charset=utf-8"

_ENVELOPE_TEMPLATE = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<soap12:Envelope xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
    'xmlns:xsd="http://www.w3.org/2001/XMLSchema" '
    f'xmlns:soap12="{SOAP12_ENVELOPE_NS}">'
    "<soap12:Body>{body}</soap12:Body>"
    "</soap12:Envelope>"
)


def soap12_content_type(action: str) -> str:
    """SOAP 1.2 carries the action as a content-type parameter (no SOAPAction header)."""

    return f'{SOAP12_CONTENT_TYPE}; action="{action}"'


def build_request_envelope(*, namespace: str, method: str, params: Mapping[str, str]) -> bytes:
    """Serializa una llamada `method(**params)` como envelope SOAP 1.2 (UTF-8)."""

    children = "".join(f"<{name}>{escape(value)}</{name}>" for name, value in params.items())
    body = f"<{method} xmlns={quoteattr(namespace)}>{children}</{method}>"
    try:
        return _ENVELOPE_TEMPLATE.format(body=body).encode("utf-8")
    except UnicodeEncodeError as exc:
        raise SoapCallError(f"Cannot encode SOAP request: {exc.reason}") from exc


def _qname(namespace: str, local: str) -> str:
    return f"{{{namespace}}}{local}"


def _raise_for_fault(fault: ElementTree.Element, status_code: int | None) -> None:
    code = fault.findtext(
        f"{_qname(SOAP12_ENVELOPE_NS, 'Code')}/{_qname(SOAP12_ENVELOPE_NS, 'Value')}"
    )
    reason = fault.findtext(
        f"{_qname(SOAP12_ENVELOPE_NS, 'Reason')}/{_qname(SOAP12_ENVELOPE_NS, 'Text')}"
    )
    message = (reason or "").strip() or (code or "").strip() or "SOAP fault"
    raise SoapCallError(message, status_code=status_code, fault_code=code)


def parse_response(
    content: bytes,
    *,
    namespace: str,
    result_element: str,
    status_code: int | None = None,
) -> str:
    """Extrae el texto de `result_element` de un envelope de respuesta.

    Cualquier cosa que no sea una respuesta válida (XML roto, fault, HTTP de
    error sin fault, elemento ausente) termina en `SoapCallError`.
    """

    is_http_error = status_code is not None and status_code >= 400

    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError as exc:
        if is_http_error:
            raise SoapCallError(f"HTTP {status_code}", status_code=status_code) from exc
        raise SoapCallError(f"Malformed SOAP response: {exc}", status_code=status_code) from exc

    if root.tag != _qname(SOAP12_ENVELOPE_NS, "Envelope"):
        raise SoapCallError(
            f"Unexpected response root element: {root.tag}",
            status_code=status_code,
        )

    body = root.find(_qname(SOAP12_ENVELOPE_NS, "Body"))
    if body is None:
        raise SoapCallError("SOAP response has no Body", status_code=status_code)

    fault = body.find(_qname(SOAP12_ENVELOPE_NS, "Fault"))
    if fault is not None:
        _raise_for_fault(fault, status_code)

    if is_http_error:
        raise SoapCallError(f"HTTP {status_code}", status_code=status_code)

    result = next(body.iter(_qname(namespace, result_element)), None)
    if result is None:
        raise SoapCallError(
            f"SOAP response has no {result_element} element",
            status_code=status_code,
        )
    return result.text or ""

"""Errores del dominio.

Solo existen dos resultados por debajo del view model: éxito o fallo. Todos los
fallos del intercambio SOAP (red, timeout, XML inválido, fault remoto) se
reducen a `SoapCallError`; el mensaje es lo que ve el usuario.
"""

from __future__ import annotations


class TempConvertError(Exception):
    """Base de todos los errores de la aplicación."""


class BlankInputError(TempConvertError, ValueError):
    """Se intentó convertir un valor vacío o solo con espacios."""

    def __init__(self) -> None:
        super().__init__("Fahrenheit value must not be blank")


class SoapCallError(TempConvertError):
    """Fallo genérico de la llamada SOAP.

    `status_code` y `fault_code` son informativos (logging); no se usan para
    decidir reintentos ni recuperación.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        fault_code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.fault_code = fault_code

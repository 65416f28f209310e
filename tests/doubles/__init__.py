"""Test doubles for the conversion stack."""

from tests.doubles.fake_client import FakeConversionClient
from tests.doubles.controlled_operation import ControlledOperation
from tests.doubles.soap_payloads import SOAP_FAULT, soap_result, soap_without_result

__all__ = [
    "ControlledOperation",
    "FakeConversionClient",
    "SOAP_FAULT",
    "soap_result",
    "soap_without_result",
]

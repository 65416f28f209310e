"""Async conversion operation resolved by the test.

Every call parks on a future stored in `pending`; the test decides when and
how it resolves. Lets view model tests observe `Loading` deterministically.
"""

from __future__ import annotations

import asyncio

from core.domain.models import ConversionResult


class ControlledOperation:
    def __init__(self) -> None:
        self.calls: list[str] = []
        self.pending: list[asyncio.Future[ConversionResult]] = []

    async def __call__(self, fahrenheit_value: str) -> ConversionResult:
        self.calls.append(fahrenheit_value)
        future: asyncio.Future[ConversionResult] = asyncio.get_running_loop().create_future()
        self.pending.append(future)
        return await future

    def succeed(self, celsius_text: str, index: int = -1) -> None:
        self.pending[index].set_result(ConversionResult(celsius_text=celsius_text))

    def fail(self, exc: BaseException, index: int = -1) -> None:
        self.pending[index].set_exception(exc)

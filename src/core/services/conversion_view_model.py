"""Presentation state machine for temperature conversions.

`ConversionViewModel` is what a rendering layer talks to: it exposes the
current `PresentationState`, lets any number of observers follow it and
accepts submissions through `convert`.

Lifecycle per submission::

    Empty | Success | Error --convert--> Loading --ok--> Success
                                                 --fail--> Error

`Loading` is published synchronously inside `convert`, before the network call
starts. A new submission while another one is in flight cancels the previous
task (cancel-and-replace), so only the latest submission can resolve the state.
Closing the view model cancels in-flight work; a cancelled submission never
publishes anything.
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Awaitable, Callable

from core.domain.models import ConversionResult, is_blank
from core.domain.state import Empty, Error, Loading, PresentationState, Success
from core.services.state_cell import StateCell

_LOGGER = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Error occurred"

ConvertOperation = Callable[[str], Awaitable[ConversionResult]]


class ConversionViewModel:
    def __init__(self, operation: ConvertOperation) -> None:
        self._operation = operation
        self._state: StateCell[PresentationState] = StateCell(Empty())
        self._current: asyncio.Task[None] | None = None
        self._closed = False

    @property
    def state(self) -> PresentationState:
        return self._state.value

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Callable[[PresentationState], None]) -> Callable[[], None]:
        """Observe state changes; `listener` is called at once with the current state."""

        return self._state.subscribe(listener)

    def states(self) -> AsyncIterator[PresentationState]:
        """Async stream of the latest state (current one first)."""

        return self._state.stream()

    def convert(self, fahrenheit_value: str) -> asyncio.Task[None] | None:
        """Submit a value for conversion.

        Blank input is not submitted: the state is left untouched and `None` is
        returned. Otherwise `Loading` is published before returning the task
        that resolves the state. Must be called from a running event loop.
        """

        if self._closed:
            raise RuntimeError("ConversionViewModel is closed")
        if is_blank(fahrenheit_value):
            _LOGGER.debug("Ignoring blank submission")
            return None

        loop = asyncio.get_running_loop()

        previous = self._current
        if previous is not None and not previous.done():
            _LOGGER.debug("Cancelling superseded conversion")
            previous.cancel()

        self._publish(Loading())
        task = loop.create_task(self._run(fahrenheit_value))
        self._current = task
        return task

    async def submit(self, fahrenheit_value: str) -> PresentationState:
        """`convert` and wait for that submission to settle; return the state afterwards.

        If the submission is replaced by a newer one, the returned state is
        whatever the view model holds once the replaced task has unwound.
        """

        task = self.convert(fahrenheit_value)
        if task is not None:
            await asyncio.wait([task])
        return self.state

    async def _run(self, fahrenheit_value: str) -> None:
        try:
            result = await self._operation(fahrenheit_value)
        except asyncio.CancelledError:
            _LOGGER.debug("Conversion of %r cancelled", fahrenheit_value)
            raise
        except Exception as exc:
            _LOGGER.info("Conversion of %r failed: %s", fahrenheit_value, exc)
            self._publish(Error(message=str(exc) or FALLBACK_ERROR_MESSAGE))
        else:
            self._publish(Success(celsius_text=result.celsius_text))

    def _publish(self, state: PresentationState) -> None:
        _LOGGER.debug("State -> %s", state.kind)
        self._state.set(state)

    def close(self) -> None:
        """End the owning scope: cancel in-flight work, publish nothing more."""

        self._closed = True
        if self._current is not None and not self._current.done():
            self._current.cancel()

    async def aclose(self) -> None:
        """`close` and wait until the cancelled task has unwound."""

        self.close()
        task = self._current
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

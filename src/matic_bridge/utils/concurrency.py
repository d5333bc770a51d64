"""
Concurrency helpers.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class SingleFlight(Generic[T]):
    """
    Lazily computed value with at most one computation in flight.

    The first ``get`` schedules the factory as a task and stores the task
    before awaiting it, so every concurrent caller awaits the same task.
    A successful result is kept for good; a failure or a cancelled task is
    forgotten and the next ``get`` starts over.

    Example:
        ```python
        handle = SingleFlight()

        async def load():
            return await fetch_contract()

        first, second = await asyncio.gather(handle.get(load), handle.get(load))
        assert first is second  # load() ran once
        ```
    """

    def __init__(self) -> None:
        self._task: Optional["asyncio.Future[T]"] = None
        self._has_value = False
        self._value: Optional[T] = None

    @property
    def has_value(self) -> bool:
        return self._has_value

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    async def get(self, factory: Callable[[], Awaitable[T]]) -> T:
        if self._has_value:
            return self._value  # type: ignore[return-value]

        if self._task is None:
            self._task = asyncio.ensure_future(factory())
        task = self._task

        try:
            # Shielded: one cancelled waiter must not cancel the shared fetch.
            value = await asyncio.shield(task)
        except (Exception, asyncio.CancelledError):
            # A failed or cancelled shared task is dropped; a live one is kept.
            if self._task is task and task.done():
                self._task = None
            raise

        self._value = value
        self._has_value = True
        return value

    def reset(self) -> None:
        self._task = None
        self._has_value = False
        self._value = None

from __future__ import annotations

import asyncio
from typing import Any, Coroutine, Generator


class RequestCounter:
    """Hands out increasing request numbers so callers can drop superseded results.

    A result is only worth committing when the request that produced it is
    still the latest one issued.
    """

    __slots__ = ("_latest",)

    def __init__(self) -> None:
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def next(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest


class TaskHandle[T]:
    """A started asyncio task the caller may await or simply walk away from."""

    __slots__ = ("_task", "_abandoned")

    def __init__(self, task: asyncio.Task[T]) -> None:
        self._task = task
        self._abandoned = False
        task.add_done_callback(self._consume_exception)

    @classmethod
    def start(cls, coro: Coroutine[Any, Any, T]) -> TaskHandle[T]:
        return cls(asyncio.get_running_loop().create_task(coro))

    @property
    def done(self) -> bool:
        return self._task.done()

    @property
    def abandoned(self) -> bool:
        return self._abandoned

    def abandon(self) -> None:
        """Stop caring about the result; the task still runs to completion."""
        self._abandoned = True

    def stop(self) -> None:
        self._task.cancel()

    def __await__(self) -> Generator[Any, None, T]:
        return self._task.__await__()

    def _consume_exception(self, task: asyncio.Task[T]) -> None:
        # Retrieve the exception so asyncio does not warn about it when nobody awaits.
        if not task.cancelled():
            task.exception()

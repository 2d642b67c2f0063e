from __future__ import annotations

import asyncio

from result import Err, Ok, Result

from cleanos.app_logger import get_logger
from cleanos.exceptions import GatewayError
from cleanos.gateway import Gateway
from cleanos.models.system import SystemSnapshot
from cleanos.services.requests import RequestCounter, TaskHandle
from cleanos.store.store import AppStore

logger = get_logger(__name__)

DEFAULT_REFRESH_SECONDS = 30.0


class SystemMonitor:
    """Keeps the system snapshot and storage breakdown slices fresh.

    A failed refresh leaves the store untouched and records the message in
    ``error``, which belongs to the surface that owns this monitor.
    """

    def __init__(self, gateway: Gateway, store: AppStore, interval: float = DEFAULT_REFRESH_SECONDS) -> None:
        self._gateway = gateway
        self._store = store
        self._interval = interval
        self._requests = RequestCounter()
        self._stopped = asyncio.Event()
        self.error: str | None = None
        self.loading = True

    async def refresh(self) -> Result[SystemSnapshot, str]:
        token = self._requests.next()
        try:
            info, storage = await asyncio.gather(
                self._gateway.get_system_info(),
                self._gateway.get_storage_breakdown(),
            )
        except GatewayError as exc:
            if self._requests.is_current(token):
                self.error = exc.message
                self.loading = False
            logger.warning("System refresh failed: %s", exc.message)
            return Err(exc.message)

        if not self._requests.is_current(token):
            return Err("Refresh superseded by a newer request.")
        self._store.set_system_info(info)
        self._store.set_storage_breakdown(storage)
        self.error = None
        self.loading = False
        return Ok(info)

    async def run(self) -> None:
        self._stopped.clear()
        while not self._stopped.is_set():
            try:
                await self.refresh()
            except Exception:  # noqa: BLE001
                self.error = "System refresh failed unexpectedly."
                self.loading = False
                logger.exception("System refresh failed unexpectedly")
            try:
                await asyncio.wait_for(self._stopped.wait(), timeout=self._interval)
            except TimeoutError:
                continue

    def start(self) -> TaskHandle[None]:
        return TaskHandle.start(self.run())

    def stop(self) -> None:
        self._stopped.set()

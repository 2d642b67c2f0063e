from __future__ import annotations

from result import Err, Ok, Result

from cleanos.app_logger import get_logger
from cleanos.exceptions import GatewayError
from cleanos.gateway import Gateway
from cleanos.models.files import FileRecord
from cleanos.services.requests import RequestCounter
from cleanos.store.store import AppStore

logger = get_logger(__name__)


class ScanController:
    """Runs a directory scan through the gateway and publishes the result.

    Only one scan may be outstanding; the ``is_scanning`` flag in the store is
    the gate. A result that arrives after a newer scan was requested is
    discarded.
    """

    def __init__(self, gateway: Gateway, store: AppStore) -> None:
        self._gateway = gateway
        self._store = store
        self._requests = RequestCounter()

    async def scan(self, path: str) -> Result[tuple[FileRecord, ...], str]:
        if self._store.state.is_scanning:
            return Err("A scan is already running.")

        token = self._requests.next()
        self._store.set_is_scanning(True)
        try:
            files = tuple(await self._gateway.scan_directory(path))
        except GatewayError as exc:
            logger.warning("Scan of %s failed: %s", path, exc.message)
            return Err(exc.message)
        finally:
            if self._requests.is_current(token):
                self._store.set_is_scanning(False)
                self._store.set_scan_progress(None)

        if not self._requests.is_current(token):
            return Err("Scan superseded by a newer request.")

        self._store.set_scanned_files(files)
        self._store.prune_selection()
        logger.info("Scanned %s: %d entries", path, len(files))
        return Ok(files)

    def discard_pending(self) -> None:
        """Forget any scan in flight; its result will be ignored when it lands."""
        self._requests.next()
        self._store.set_is_scanning(False)

from __future__ import annotations

import json

from result import Err, Ok, Result

from cleanos.app_logger import get_logger
from cleanos.exceptions import GatewayError
from cleanos.gateway import Gateway

logger = get_logger(__name__)

SCAN_DIRECTORIES_KEY = "scan_directories"
DEFAULT_SCAN_DIRECTORIES: tuple[str, ...] = ("~/Documents", "~/Downloads", "~/Desktop")


def decode_directories(raw: str | None) -> list[str]:
    if not raw:
        return list(DEFAULT_SCAN_DIRECTORIES)
    try:
        payload = json.loads(raw)
    except ValueError:
        return list(DEFAULT_SCAN_DIRECTORIES)
    if not isinstance(payload, list) or not all(isinstance(x, str) for x in payload):
        return list(DEFAULT_SCAN_DIRECTORIES)
    return payload


class ScanDirectories:
    """The user's scan directory list, persisted as one JSON setting."""

    def __init__(self, gateway: Gateway) -> None:
        self._gateway = gateway
        self._directories: list[str] = list(DEFAULT_SCAN_DIRECTORIES)

    @property
    def directories(self) -> tuple[str, ...]:
        return tuple(self._directories)

    async def load(self) -> tuple[str, ...]:
        try:
            raw = await self._gateway.get_setting(SCAN_DIRECTORIES_KEY)
        except GatewayError as exc:
            logger.warning("Reading scan directories failed: %s", exc.message)
            raw = None
        self._directories = decode_directories(raw)
        return self.directories

    async def add(self, directory: str) -> Result[tuple[str, ...], str]:
        directory = directory.strip()
        if not directory:
            return Err("Directory must not be empty.")
        if directory in self._directories:
            return Ok(self.directories)
        return await self._save([*self._directories, directory])

    async def remove(self, directory: str) -> Result[tuple[str, ...], str]:
        if directory not in self._directories:
            return Err(f"{directory} is not in the scan list.")
        return await self._save([d for d in self._directories if d != directory])

    async def _save(self, directories: list[str]) -> Result[tuple[str, ...], str]:
        try:
            await self._gateway.set_setting(SCAN_DIRECTORIES_KEY, json.dumps(directories))
        except GatewayError as exc:
            return Err(exc.message)
        self._directories = directories
        return Ok(self.directories)

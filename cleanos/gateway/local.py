from __future__ import annotations

import asyncio
import hashlib
import json
import platform
import shutil
from pathlib import PurePosixPath
from typing import Any, NoReturn

import aiohttp

from cleanos.app_logger import get_logger
from cleanos.config.schema import AppConfig
from cleanos.exceptions import GatewayError
from cleanos.models.files import AIAnalysis, FileRecord
from cleanos.models.inventory import CleanupResult, ContainerInventory, PackageCacheEntry
from cleanos.models.system import StorageBreakdown, StorageCategory, SystemSnapshot, UpdateInfo
from cleanos.services.fs import DEFAULT_FS, FileSystem

logger = get_logger(__name__)

VERSION = "0.1.0"
_MEMINFO = "/proc/meminfo"


def _unsupported(operation: str) -> NoReturn:
    raise GatewayError(f"{operation} requires the cleanos backend service.")


def _parse_meminfo(text: str) -> dict[str, int]:
    values: dict[str, int] = {}
    for line in text.splitlines():
        key, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if parts and parts[0].isdigit():
            # /proc/meminfo reports kB.
            values[key.strip()] = int(parts[0]) * 1024
    return values


class LocalGateway:
    """In-process stand-in for the backend.

    Covers what can be answered without privileged helpers: the model
    catalog, settings, a host snapshot and single-level directory listings.
    Everything else raises ``GatewayError``.
    """

    def __init__(self, config: AppConfig, fs: FileSystem = DEFAULT_FS) -> None:
        self._config = config
        self._fs = fs
        self._settings_path = fs.expanduser(config.settings_path)

    # Files and system

    async def scan_directory(self, path: str) -> list[FileRecord]:
        return await asyncio.to_thread(self._list_directory, path)

    def _list_directory(self, path: str) -> list[FileRecord]:
        resolved = self._fs.absolute(self._fs.expanduser(path))
        if not self._fs.exists(resolved):
            raise GatewayError(f"Path does not exist: {resolved}")
        try:
            entries = list(self._fs.scandir(resolved))
        except OSError as exc:
            raise GatewayError(f"Cannot read {resolved}: {exc}") from exc

        records: list[FileRecord] = []
        for entry in entries:
            st = entry.stat
            if st is None:
                continue
            suffix = PurePosixPath(entry.name).suffix.lstrip(".")
            records.append(
                FileRecord(
                    id=hashlib.sha1(entry.path.encode("utf-8", "surrogateescape")).hexdigest(),
                    path=entry.path,
                    name=entry.name,
                    size=0 if st.is_dir else st.size,
                    modified_at=st.mtime,
                    is_directory=st.is_dir,
                    extension=suffix or None,
                )
            )
        return records

    async def get_system_info(self) -> SystemSnapshot:
        return await asyncio.to_thread(self._system_info)

    def _system_info(self) -> SystemSnapshot:
        try:
            disk = shutil.disk_usage(self._fs.expanduser("~"))
        except OSError as exc:
            raise GatewayError(f"Cannot read disk usage: {exc}") from exc

        memory: dict[str, int] = {}
        if self._fs.exists(_MEMINFO):
            try:
                memory = _parse_meminfo(self._fs.read_text(_MEMINFO))
            except OSError:
                logger.debug("Could not read %s", _MEMINFO)
        total = memory.get("MemTotal", 0)
        available = memory.get("MemAvailable", memory.get("MemFree", 0))

        return SystemSnapshot(
            hostname=platform.node(),
            os=f"{platform.system()} {platform.release()}".strip(),
            kernel=platform.version(),
            memory_total=total,
            memory_used=max(0, total - available),
            memory_available=available,
            disk_total=disk.total,
            disk_used=disk.used,
            disk_available=disk.free,
        )

    async def get_storage_breakdown(self) -> StorageBreakdown:
        info = await self.get_system_info()
        return StorageBreakdown(
            categories=(StorageCategory(name="Used", size=info.disk_used, path="~"),),
            total_used=info.disk_used,
            total_available=info.disk_available,
        )

    # Cleanup targets

    async def get_docker_info(self) -> ContainerInventory:
        _unsupported("Docker inventory")

    async def clean_docker(self, target: str) -> CleanupResult:
        _unsupported("Docker cleanup")

    async def get_package_caches(self) -> list[PackageCacheEntry]:
        _unsupported("Package cache inventory")

    async def clean_package_cache(self, manager: str) -> CleanupResult:
        _unsupported("Package cache cleanup")

    async def get_log_info(self) -> StorageCategory:
        _unsupported("Log inventory")

    async def clean_logs(self) -> CleanupResult:
        _unsupported("Log cleanup")

    async def get_browser_caches(self) -> list[PackageCacheEntry]:
        _unsupported("Browser cache inventory")

    async def clean_browser_cache(self, browser: str) -> CleanupResult:
        _unsupported("Browser cache cleanup")

    # AI

    async def fetch_available_models(self) -> str:
        timeout = aiohttp.ClientTimeout(total=self._config.request_timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(self._config.catalog_url, headers={"Accept": "application/json"}) as resp:
                    if resp.status != 200:
                        raise GatewayError(f"Catalog service returned status {resp.status}")
                    body = await resp.read()
                    encoding = resp.get_encoding()
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise GatewayError(f"HTTP request failed: {exc}") from exc
        try:
            return body.decode(encoding)
        except (LookupError, UnicodeDecodeError) as exc:
            raise GatewayError(f"Catalog response is not valid text: {exc}") from exc

    async def chat_with_ai(self, provider: str, message: str, model: str | None = None) -> str:
        _unsupported("Chat")

    async def test_ai_connection(self, provider: str, api_key: str | None, model: str) -> bool:
        _unsupported("Connection testing")

    async def analyze_files_with_ai(self, provider: str, file_paths: list[str]) -> list[AIAnalysis]:
        _unsupported("File analysis")

    # Credentials

    async def store_api_key(self, provider: str, key: str) -> None:
        _unsupported("Credential storage")

    async def get_api_key(self, provider: str) -> str:
        _unsupported("Credential storage")

    async def delete_api_key(self, provider: str) -> None:
        _unsupported("Credential storage")

    async def has_api_key(self, provider: str) -> bool:
        return False

    # Settings

    def _read_settings(self) -> dict[str, Any]:
        if not self._fs.exists(self._settings_path):
            return {}
        try:
            payload = json.loads(self._fs.read_text(self._settings_path))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable settings at %s: %s", self._settings_path, exc)
            return {}
        return payload if isinstance(payload, dict) else {}

    async def get_setting(self, key: str) -> str | None:
        value = self._read_settings().get(key)
        return value if isinstance(value, str) else None

    async def set_setting(self, key: str, value: str) -> None:
        settings = self._read_settings()
        settings[key] = value
        try:
            self._fs.write_text(self._settings_path, json.dumps(settings, indent=2))
        except OSError as exc:
            raise GatewayError(f"Saving setting {key} failed: {exc}") from exc

    # Updates

    async def check_for_updates(self) -> UpdateInfo | None:
        return None

    async def get_current_version(self) -> str:
        return VERSION

from __future__ import annotations

import asyncio
import json
from collections import Counter
from typing import Any

from cleanos.exceptions import GatewayError
from cleanos.models.files import AIAnalysis, FileRecord
from cleanos.models.inventory import CleanupResult, ContainerInventory, PackageCacheEntry
from cleanos.models.system import StorageBreakdown, StorageCategory, SystemSnapshot, UpdateInfo


def catalog_json(*models: dict[str, Any]) -> str:
    return json.dumps({"data": list(models)})


def catalog_item(model_id: str, **fields: Any) -> dict[str, Any]:
    item: dict[str, Any] = {
        "id": model_id,
        "name": model_id.split("/")[-1],
        "description": "",
        "pricing": {"prompt": "0.000001", "completion": "0.000002"},
        "context_length": 8192,
        "architecture": {"modality": "text->text", "tokenizer": "GPT"},
    }
    item.update(fields)
    return item


class MemoryGateway:
    """Scriptable in-memory gateway.

    ``fail(op, message)`` makes an operation raise; ``hold(op)`` returns an
    event the operation waits on before answering.
    """

    def __init__(self) -> None:
        self.calls: Counter[str] = Counter()
        self.catalog = catalog_json()
        self.files: dict[str, list[FileRecord]] = {}
        self.system = SystemSnapshot(hostname="box", os="Linux", kernel="6.1")
        self.storage = StorageBreakdown()
        self.settings: dict[str, str] = {}
        self.keys: dict[str, str] = {}
        self.valid_keys: set[str] = set()
        self._failures: dict[str, str] = {}
        self._gates: dict[str, asyncio.Event] = {}

    def with_catalog(self, raw: str) -> MemoryGateway:
        self.catalog = raw
        return self

    def with_files(self, path: str, files: list[FileRecord]) -> MemoryGateway:
        self.files[path] = files
        return self

    def with_system(self, snapshot: SystemSnapshot) -> MemoryGateway:
        self.system = snapshot
        return self

    def fail(self, op: str, message: str = "backend unavailable") -> MemoryGateway:
        self._failures[op] = message
        return self

    def recover(self, op: str) -> MemoryGateway:
        self._failures.pop(op, None)
        return self

    def hold(self, op: str) -> asyncio.Event:
        gate = asyncio.Event()
        self._gates[op] = gate
        return gate

    async def _enter(self, op: str) -> None:
        self.calls[op] += 1
        gate = self._gates.pop(op, None)
        if gate is not None:
            await gate.wait()
        message = self._failures.get(op)
        if message is not None:
            raise GatewayError(message)

    async def scan_directory(self, path: str) -> list[FileRecord]:
        await self._enter("scan_directory")
        return list(self.files.get(path, []))

    async def get_system_info(self) -> SystemSnapshot:
        await self._enter("get_system_info")
        return self.system

    async def get_storage_breakdown(self) -> StorageBreakdown:
        await self._enter("get_storage_breakdown")
        return self.storage

    async def get_docker_info(self) -> ContainerInventory:
        await self._enter("get_docker_info")
        return ContainerInventory()

    async def clean_docker(self, target: str) -> CleanupResult:
        await self._enter("clean_docker")
        return CleanupResult(success=True, space_freed=0, message=target)

    async def get_package_caches(self) -> list[PackageCacheEntry]:
        await self._enter("get_package_caches")
        return []

    async def clean_package_cache(self, manager: str) -> CleanupResult:
        await self._enter("clean_package_cache")
        return CleanupResult(success=True, space_freed=0, message=manager)

    async def get_log_info(self) -> StorageCategory:
        await self._enter("get_log_info")
        return StorageCategory(name="Logs", size=0)

    async def clean_logs(self) -> CleanupResult:
        await self._enter("clean_logs")
        return CleanupResult(success=True, space_freed=0, message="")

    async def get_browser_caches(self) -> list[PackageCacheEntry]:
        await self._enter("get_browser_caches")
        return []

    async def clean_browser_cache(self, browser: str) -> CleanupResult:
        await self._enter("clean_browser_cache")
        return CleanupResult(success=True, space_freed=0, message=browser)

    async def fetch_available_models(self) -> str:
        await self._enter("fetch_available_models")
        return self.catalog

    async def chat_with_ai(self, provider: str, message: str, model: str | None = None) -> str:
        await self._enter("chat_with_ai")
        return message

    async def test_ai_connection(self, provider: str, api_key: str | None, model: str) -> bool:
        await self._enter("test_ai_connection")
        return api_key in self.valid_keys

    async def analyze_files_with_ai(self, provider: str, file_paths: list[str]) -> list[AIAnalysis]:
        await self._enter("analyze_files_with_ai")
        return []

    async def store_api_key(self, provider: str, key: str) -> None:
        await self._enter("store_api_key")
        self.keys[provider] = key

    async def get_api_key(self, provider: str) -> str:
        await self._enter("get_api_key")
        if provider not in self.keys:
            raise GatewayError(f"No API key saved for {provider}")
        return self.keys[provider]

    async def delete_api_key(self, provider: str) -> None:
        await self._enter("delete_api_key")
        self.keys.pop(provider, None)

    async def has_api_key(self, provider: str) -> bool:
        await self._enter("has_api_key")
        return provider in self.keys

    async def get_setting(self, key: str) -> str | None:
        await self._enter("get_setting")
        return self.settings.get(key)

    async def set_setting(self, key: str, value: str) -> None:
        await self._enter("set_setting")
        self.settings[key] = value

    async def check_for_updates(self) -> UpdateInfo | None:
        await self._enter("check_for_updates")
        return None

    async def get_current_version(self) -> str:
        await self._enter("get_current_version")
        return "0.0.0"

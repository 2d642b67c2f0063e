"""Contract of the backend command interface.

Every operation is awaited and either returns a typed value or raises
``GatewayError`` carrying a human-readable message. The orchestration core
depends only on this protocol, never on a concrete backend.
"""

from __future__ import annotations

from typing import Protocol

from cleanos.exceptions import GatewayError
from cleanos.models.files import AIAnalysis, FileRecord
from cleanos.models.inventory import CleanupResult, ContainerInventory, PackageCacheEntry
from cleanos.models.system import StorageBreakdown, StorageCategory, SystemSnapshot, UpdateInfo


class Gateway(Protocol):
    # Files and system
    async def scan_directory(self, path: str) -> list[FileRecord]: ...

    async def get_system_info(self) -> SystemSnapshot: ...

    async def get_storage_breakdown(self) -> StorageBreakdown: ...

    # Cleanup targets
    async def get_docker_info(self) -> ContainerInventory: ...

    async def clean_docker(self, target: str) -> CleanupResult: ...

    async def get_package_caches(self) -> list[PackageCacheEntry]: ...

    async def clean_package_cache(self, manager: str) -> CleanupResult: ...

    async def get_log_info(self) -> StorageCategory: ...

    async def clean_logs(self) -> CleanupResult: ...

    async def get_browser_caches(self) -> list[PackageCacheEntry]: ...

    async def clean_browser_cache(self, browser: str) -> CleanupResult: ...

    # AI
    async def fetch_available_models(self) -> str: ...

    async def chat_with_ai(self, provider: str, message: str, model: str | None = None) -> str: ...

    async def test_ai_connection(self, provider: str, api_key: str | None, model: str) -> bool: ...

    async def analyze_files_with_ai(self, provider: str, file_paths: list[str]) -> list[AIAnalysis]: ...

    # Credentials
    async def store_api_key(self, provider: str, key: str) -> None: ...

    async def get_api_key(self, provider: str) -> str: ...

    async def delete_api_key(self, provider: str) -> None: ...

    async def has_api_key(self, provider: str) -> bool: ...

    # Settings
    async def get_setting(self, key: str) -> str | None: ...

    async def set_setting(self, key: str, value: str) -> None: ...

    # Updates
    async def check_for_updates(self) -> UpdateInfo | None: ...

    async def get_current_version(self) -> str: ...


__all__ = [
    "Gateway",
    "GatewayError",
]

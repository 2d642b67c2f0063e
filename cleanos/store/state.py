from __future__ import annotations

from dataclasses import dataclass

from cleanos.models.enums import AppView, Theme
from cleanos.models.files import FileRecord, ScanProgress
from cleanos.models.inventory import CleanupRecommendation, ContainerInventory, PackageCacheEntry
from cleanos.models.providers import ProviderStatus
from cleanos.models.system import StorageBreakdown, SystemSnapshot


@dataclass(slots=True, frozen=True)
class AppState:
    # UI
    theme: Theme = Theme.DARK
    current_view: AppView = AppView.DASHBOARD
    sidebar_collapsed: bool = False

    # Files
    scanned_files: tuple[FileRecord, ...] = ()
    selected_files: frozenset[str] = frozenset()
    scan_progress: ScanProgress | None = None
    is_scanning: bool = False

    # System
    system_info: SystemSnapshot | None = None
    storage_breakdown: StorageBreakdown | None = None
    docker_info: ContainerInventory | None = None
    package_caches: tuple[PackageCacheEntry, ...] = ()
    cleanup_recommendations: tuple[CleanupRecommendation, ...] = ()

    # AI providers
    providers: tuple[ProviderStatus, ...] = ()
    active_provider: str | None = None

    def provider_status(self, provider_id: str) -> ProviderStatus | None:
        return next((p for p in self.providers if p.id == provider_id), None)

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Iterable

from cleanos.app_logger import get_logger
from cleanos.models.enums import AppView, Theme
from cleanos.models.files import FileRecord, ScanProgress
from cleanos.models.inventory import CleanupRecommendation, ContainerInventory, PackageCacheEntry
from cleanos.models.providers import ProviderStatus
from cleanos.models.system import StorageBreakdown, SystemSnapshot
from cleanos.store.state import AppState

logger = get_logger(__name__)

type Listener = Callable[[AppState], None]
type DarkModeHook = Callable[[bool], None]


class AppStore:
    """Shared state for every view surface.

    Each action swaps in a new immutable ``AppState``; nothing mutates a
    committed snapshot. Actions never raise. Callers deal with failed gateway
    calls before they get here, usually by not calling the action at all.
    """

    def __init__(self, initial: AppState | None = None, on_dark_mode: DarkModeHook | None = None) -> None:
        self._state = initial or AppState()
        self._listeners: list[Listener] = []
        self._on_dark_mode = on_dark_mode

    @property
    def state(self) -> AppState:
        return self._state

    def get_state(self) -> AppState:
        return self._state

    def set_dark_mode_hook(self, hook: DarkModeHook | None) -> None:
        self._on_dark_mode = hook

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        snapshot = self._state
        for listener in tuple(self._listeners):
            try:
                listener(snapshot)
            except Exception:  # noqa: BLE001
                logger.exception("State listener %r failed", listener)

    # UI

    def set_theme(self, theme: Theme) -> None:
        self._commit(theme=theme)
        if self._on_dark_mode is None:
            return
        try:
            self._on_dark_mode(theme is Theme.DARK)
        except Exception:  # noqa: BLE001
            logger.exception("Dark mode hook failed")

    def set_current_view(self, view: AppView) -> None:
        self._commit(current_view=view)

    def toggle_sidebar(self) -> None:
        self._commit(sidebar_collapsed=not self._state.sidebar_collapsed)

    # Files

    def set_scanned_files(self, files: Iterable[FileRecord]) -> None:
        # Selection is left alone; ids that no longer resolve are pruned separately.
        self._commit(scanned_files=tuple(files))

    def toggle_file_selection(self, file_id: str) -> None:
        selected = self._state.selected_files
        if file_id in selected:
            self._commit(selected_files=selected - {file_id})
        else:
            self._commit(selected_files=selected | {file_id})

    def select_all_files(self) -> None:
        self._commit(selected_files=frozenset(f.id for f in self._state.scanned_files))

    def deselect_all_files(self) -> None:
        self._commit(selected_files=frozenset())

    def prune_selection(self) -> None:
        known = {f.id for f in self._state.scanned_files}
        selected = self._state.selected_files
        if selected <= known:
            return
        self._commit(selected_files=selected & known)

    def set_scan_progress(self, progress: ScanProgress | None) -> None:
        self._commit(scan_progress=progress)

    def set_is_scanning(self, scanning: bool) -> None:
        self._commit(is_scanning=scanning)

    # System

    def set_system_info(self, info: SystemSnapshot) -> None:
        self._commit(system_info=info)

    def set_storage_breakdown(self, breakdown: StorageBreakdown) -> None:
        self._commit(storage_breakdown=breakdown)

    def set_docker_info(self, info: ContainerInventory) -> None:
        self._commit(docker_info=info)

    def set_package_caches(self, caches: Iterable[PackageCacheEntry]) -> None:
        self._commit(package_caches=tuple(caches))

    def set_cleanup_recommendations(self, recommendations: Iterable[CleanupRecommendation]) -> None:
        self._commit(cleanup_recommendations=tuple(recommendations))

    # AI providers

    def set_providers(self, providers: Iterable[ProviderStatus]) -> None:
        self._commit(providers=tuple(providers))

    def update_provider_status(self, status: ProviderStatus) -> None:
        current = self._state.providers
        if any(p.id == status.id for p in current):
            updated = tuple(status if p.id == status.id else p for p in current)
        else:
            updated = (*current, status)
        self._commit(providers=updated)

    def set_active_provider(self, provider_id: str | None) -> None:
        # Not checked against ``providers``; callers keep the two consistent.
        self._commit(active_provider=provider_id)

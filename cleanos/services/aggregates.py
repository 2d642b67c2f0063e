"""Totals and percentages derived from the current store snapshot.

Nothing here is cached; every call recomputes from the state it is given.
"""

from __future__ import annotations

import math
from typing import Iterable

from cleanos.models.enums import RiskLevel, Severity
from cleanos.models.inventory import ContainerInventory, PackageCacheEntry
from cleanos.models.system import StorageBreakdown, SystemSnapshot
from cleanos.store.state import AppState

_SEVERITY: dict[RiskLevel, Severity] = {
    RiskLevel.LOW: Severity.FAVORABLE,
    RiskLevel.MEDIUM: Severity.CAUTIONARY,
    RiskLevel.HIGH: Severity.BLOCKING,
}


def total_scanned_size(state: AppState) -> int:
    return sum(f.size for f in state.scanned_files)


def selected_size(state: AppState) -> int:
    return sum(f.size for f in state.scanned_files if f.id in state.selected_files)


def docker_reclaimable(inventory: ContainerInventory | None) -> int:
    if inventory is None:
        return 0
    unused_images = sum(i.size for i in inventory.images if not i.in_use)
    unused_volumes = sum(v.size for v in inventory.volumes if not v.in_use)
    return inventory.build_cache_size + unused_images + unused_volumes


def package_cache_size(caches: Iterable[PackageCacheEntry]) -> int:
    return sum(c.size for c in caches)


def reclaimable_space(state: AppState, include_system: bool = False) -> int:
    total = sum(r.space_reclaimable for r in state.cleanup_recommendations)
    if include_system:
        total += docker_reclaimable(state.docker_info) + package_cache_size(state.package_caches)
    return total


def percent(used: float, total: float) -> int:
    if total <= 0:
        return 0
    ratio = used / total * 100
    if not math.isfinite(ratio):
        return 0
    # Round half up; Python's round() would send 12.5 to 12.
    return int(min(100.0, max(0.0, math.floor(ratio + 0.5))))


def disk_percent(snapshot: SystemSnapshot | None) -> int:
    if snapshot is None:
        return 0
    return percent(snapshot.disk_used, snapshot.disk_total)


def memory_percent(snapshot: SystemSnapshot | None) -> int:
    if snapshot is None:
        return 0
    return percent(snapshot.memory_used, snapshot.memory_total)


def risk_severity(risk: RiskLevel) -> Severity:
    return _SEVERITY[risk]


def category_percentages(breakdown: StorageBreakdown | None) -> list[tuple[str, int, int]]:
    """``(name, size, percent)`` per category, relative to the category sum."""
    if breakdown is None:
        return []
    total = breakdown.category_total
    return [(cat.name, cat.size, percent(cat.size, total)) for cat in breakdown.categories]

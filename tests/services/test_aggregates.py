from __future__ import annotations

import pytest

from cleanos.models.enums import RiskLevel, Severity
from cleanos.models.files import FileRecord
from cleanos.models.inventory import (
    CleanupRecommendation,
    ContainerInventory,
    DockerImage,
    DockerVolume,
    PackageCacheEntry,
)
from cleanos.models.system import StorageBreakdown, StorageCategory, SystemSnapshot
from cleanos.services.aggregates import (
    category_percentages,
    disk_percent,
    docker_reclaimable,
    memory_percent,
    percent,
    reclaimable_space,
    risk_severity,
    selected_size,
    total_scanned_size,
)
from cleanos.store import AppStore


def _file(file_id: str, size: int) -> FileRecord:
    return FileRecord(id=file_id, path=f"/data/{file_id}", name=file_id, size=size, modified_at=0.0)


def _recommendation(rec_id: str, space: int, risk: RiskLevel = RiskLevel.LOW) -> CleanupRecommendation:
    return CleanupRecommendation(
        id=rec_id,
        category="cache",
        title=rec_id,
        description="",
        space_reclaimable=space,
        risk_level=risk,
    )


def test_scanned_and_selected_totals() -> None:
    store = AppStore()
    store.set_scanned_files([_file("a", 100), _file("b", 200), _file("c", 300)])
    assert total_scanned_size(store.state) == 600

    store.select_all_files()
    store.toggle_file_selection("b")
    assert selected_size(store.state) == 400


def test_selected_ids_without_files_add_nothing() -> None:
    store = AppStore()
    store.set_scanned_files([_file("a", 100)])
    store.toggle_file_selection("ghost")
    assert selected_size(store.state) == 0


@pytest.mark.parametrize(
    ("used", "total", "expected"),
    [
        (0, 0, 0),
        (5, 0, 0),
        (1, 8, 13),
        (1, 3, 33),
        (2, 3, 67),
        (150, 100, 100),
        (-5, 100, 0),
        (50, 100, 50),
    ],
)
def test_percent(used: int, total: int, expected: int) -> None:
    assert percent(used, total) == expected


def test_percent_rounds_half_up() -> None:
    assert percent(125, 1000) == 13
    assert percent(25, 1000) == 3


def test_disk_and_memory_percent() -> None:
    snapshot = SystemSnapshot(
        hostname="h",
        os="Linux",
        kernel="6",
        memory_total=16,
        memory_used=4,
        disk_total=0,
        disk_used=10,
    )
    assert memory_percent(snapshot) == 25
    assert disk_percent(snapshot) == 0
    assert memory_percent(None) == 0


def test_docker_reclaimable_counts_unused_only() -> None:
    inventory = ContainerInventory(
        images=(
            DockerImage(id="1", repository="app", tag="old", size=100),
            DockerImage(id="2", repository="app", tag="live", size=900, in_use=True),
        ),
        volumes=(
            DockerVolume(name="orphan", driver="local", size=40),
            DockerVolume(name="db", driver="local", size=500, in_use=True),
        ),
        build_cache_size=10,
    )
    assert docker_reclaimable(inventory) == 150
    assert docker_reclaimable(None) == 0


def test_reclaimable_space_with_and_without_system_sources() -> None:
    store = AppStore()
    store.set_cleanup_recommendations([_recommendation("logs", 50), _recommendation("tmp", 25)])
    store.set_package_caches([PackageCacheEntry(manager="pip", path="~/.cache/pip", size=7)])

    assert reclaimable_space(store.state) == 75
    # Docker inventory not loaded yet; caches still count.
    assert reclaimable_space(store.state, include_system=True) == 82

    store.set_docker_info(ContainerInventory(build_cache_size=3))
    assert reclaimable_space(store.state, include_system=True) == 85


def test_package_caches_count_without_docker_inventory() -> None:
    store = AppStore()
    store.set_package_caches([PackageCacheEntry(manager="npm", path="~/.npm", size=500)])

    assert store.state.docker_info is None
    assert reclaimable_space(store.state) == 0
    assert reclaimable_space(store.state, include_system=True) == 500


def test_risk_severity_mapping() -> None:
    assert risk_severity(RiskLevel.LOW) is Severity.FAVORABLE
    assert risk_severity(RiskLevel.MEDIUM) is Severity.CAUTIONARY
    assert risk_severity(RiskLevel.HIGH) is Severity.BLOCKING


def test_category_percentages() -> None:
    breakdown = StorageBreakdown(
        categories=(
            StorageCategory(name="Documents", size=300),
            StorageCategory(name="Media", size=100),
            StorageCategory(name="Broken", size=-20),
        )
    )
    assert category_percentages(breakdown) == [("Documents", 300, 75), ("Media", 100, 25), ("Broken", 0, 0)]
    assert category_percentages(StorageBreakdown()) == []
    assert category_percentages(None) == []

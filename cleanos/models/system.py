from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class SystemSnapshot:
    hostname: str
    os: str
    kernel: str
    memory_total: int = 0
    memory_used: int = 0
    memory_available: int = 0
    disk_total: int = 0
    disk_used: int = 0
    disk_available: int = 0


@dataclass(slots=True, frozen=True)
class StorageCategory:
    name: str
    size: int
    path: str = ""
    file_count: int = 0

    def __post_init__(self) -> None:
        if self.size < 0:
            object.__setattr__(self, "size", 0)


@dataclass(slots=True, frozen=True)
class StorageBreakdown:
    categories: tuple[StorageCategory, ...] = field(default_factory=tuple)
    total_used: int = 0
    total_available: int = 0

    @property
    def category_total(self) -> int:
        return sum(cat.size for cat in self.categories)


@dataclass(slots=True, frozen=True)
class UpdateInfo:
    version: str
    date: str
    body: str = ""

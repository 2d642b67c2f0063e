from __future__ import annotations

from dataclasses import dataclass, field

from cleanos.models.enums import RiskLevel


@dataclass(slots=True, frozen=True)
class DockerImage:
    id: str
    repository: str
    tag: str
    size: int
    created: str = ""
    in_use: bool = False


@dataclass(slots=True, frozen=True)
class DockerContainer:
    id: str
    name: str
    image: str
    status: str
    created: str = ""
    size: int = 0


@dataclass(slots=True, frozen=True)
class DockerVolume:
    name: str
    driver: str
    size: int
    in_use: bool = False


@dataclass(slots=True, frozen=True)
class ContainerInventory:
    images: tuple[DockerImage, ...] = field(default_factory=tuple)
    containers: tuple[DockerContainer, ...] = field(default_factory=tuple)
    volumes: tuple[DockerVolume, ...] = field(default_factory=tuple)
    build_cache_size: int = 0


@dataclass(slots=True, frozen=True)
class PackageCacheEntry:
    manager: str
    path: str
    size: int
    exists: bool = True


@dataclass(slots=True, frozen=True)
class CleanupItem:
    path: str
    size: int
    description: str = ""
    selected: bool = False


@dataclass(slots=True, frozen=True)
class CleanupRecommendation:
    id: str
    category: str
    title: str
    description: str
    space_reclaimable: int
    risk_level: RiskLevel
    items: tuple[CleanupItem, ...] = field(default_factory=tuple)


@dataclass(slots=True, frozen=True)
class CleanupResult:
    success: bool
    space_freed: int
    message: str

from __future__ import annotations

from dataclasses import dataclass

from cleanos.models.enums import FileAction, FileCategory


@dataclass(slots=True, frozen=True)
class AIAnalysis:
    category: FileCategory
    importance: float
    action: FileAction
    confidence: float
    suggested_location: str | None = None
    summary: str | None = None


@dataclass(slots=True, frozen=True)
class FileRecord:
    id: str
    path: str
    name: str
    size: int
    modified_at: float
    is_directory: bool = False
    hash: str | None = None
    category: FileCategory | None = None
    importance_score: float | None = None
    ai_analysis: AIAnalysis | None = None
    extension: str | None = None

    def __post_init__(self) -> None:
        if self.importance_score is not None:
            # Importance is a probability-like score.
            object.__setattr__(self, "importance_score", min(1.0, max(0.0, self.importance_score)))


@dataclass(slots=True, frozen=True)
class ScanProgress:
    total_files: int
    scanned_files: int
    current_path: str
    bytes_scanned: int = 0

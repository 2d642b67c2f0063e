from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from cleanos.services.fs import DirEntry, StatResult


@dataclass
class _MockEntry:
    is_dir: bool
    size: int
    content: str
    mtime: float = 0.0


class MemoryFileSystem:
    def __init__(self) -> None:
        self._entries: dict[str, _MockEntry] = {}

    def add_dir(self, path: str) -> MemoryFileSystem:
        self._entries[self._normalize(path)] = _MockEntry(is_dir=True, size=0, content="")
        return self

    def add_file(self, path: str, size: int = 0, content: str = "", mtime: float = 0.0) -> MemoryFileSystem:
        key = self._normalize(path)
        self._add_parents(key)
        self._entries[key] = _MockEntry(
            is_dir=False,
            size=size or len(content),
            content=content,
            mtime=mtime,
        )
        return self

    def _add_parents(self, key: str) -> None:
        for parent in reversed(PurePosixPath(key).parents):
            pk = str(parent)
            if pk not in self._entries:
                self._entries[pk] = _MockEntry(is_dir=True, size=0, content="")

    def expanduser(self, path: str) -> str:
        return path.replace("~", "/mock/home")

    def exists(self, path: str) -> bool:
        return self._normalize(path) in self._entries

    def absolute(self, path: str) -> str:
        return self._normalize(path)

    def stat(self, path: str) -> StatResult:
        key = self._normalize(path)
        entry = self._entries.get(key)
        if entry is None:
            raise OSError(f"No such file or directory: '{key}'")
        return StatResult(size=entry.size, mtime=entry.mtime, is_dir=entry.is_dir)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        key = self._normalize(path)
        entry = self._entries.get(key)
        if entry is None:
            raise OSError(f"No such file or directory: '{key}'")
        return entry.content

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        key = self._normalize(path)
        self._add_parents(key)
        self._entries[key] = _MockEntry(is_dir=False, size=len(content), content=content)

    def scandir(self, path: str) -> list[DirEntry]:
        key = self._normalize(path)
        entry = self._entries.get(key)
        if entry is None:
            raise OSError(f"No such file or directory: '{key}'")
        prefix = key.rstrip("/") + "/"
        result: list[DirEntry] = []
        for p, mock in self._entries.items():
            if not p.startswith(prefix) or "/" in p[len(prefix) :]:
                continue
            st = StatResult(size=mock.size, mtime=mock.mtime, is_dir=mock.is_dir)
            result.append(DirEntry(path=p, name=p[len(prefix) :], stat=st))
        return result

    @staticmethod
    def _normalize(path: str) -> str:
        return path.rstrip("/") or "/"

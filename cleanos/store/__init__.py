from __future__ import annotations

from cleanos.store.state import AppState
from cleanos.store.store import AppStore

__all__ = [
    "AppState",
    "AppStore",
]

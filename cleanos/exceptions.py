from __future__ import annotations


class CleanosError(Exception):
    """Base exception for all cleanos errors."""


class GatewayError(CleanosError):
    """A backend command failed.

    The backend only reports a human-readable message, so that is all this
    carries.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CatalogFetchError(CleanosError):
    """The model catalog could not be refreshed.

    Raised by an explicit refresh. Plain reads swallow it and serve
    whatever the cache still holds.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to fetch model catalog: {reason}")

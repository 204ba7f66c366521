"""Application errors.

Two families, kept distinct so the entry point can react differently:
- Fetch errors: a source could not be downloaded or decoded.
- Persistence errors: the aggregate could not be written or read back.
"""

from __future__ import annotations

from pathlib import Path


class PlaceholderJoinError(RuntimeError):
    """Base class for every error raised by the application."""


class FetchError(PlaceholderJoinError):
    def __init__(self, resource: str, url: str, reason: str) -> None:
        super().__init__(f"{resource}: {reason} ({url})")
        self.resource = resource
        self.url = url
        self.reason = reason


class FetchAllError(PlaceholderJoinError):
    """One or more of the concurrent fetches failed.

    `failures` maps the resource name to its error, so each source can be
    reported (or retried) independently.
    """

    def __init__(self, failures: dict[str, FetchError]) -> None:
        names = ", ".join(failures)
        super().__init__(f"failed to fetch: {names}")
        self.failures = failures


class PersistenceError(PlaceholderJoinError):
    def __init__(self, path: Path, operation: str, reason: str) -> None:
        super().__init__(f"could not {operation} {path}: {reason}")
        self.path = path
        self.operation = operation
        self.reason = reason

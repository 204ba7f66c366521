"""Collection fetcher contract.

Why Protocol:
- A structural contract (duck typing) without rigid inheritance.
- The fan-out pipeline depends on this abstraction, so tests can plug in
  fakes without touching HTTP.
"""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable

import httpx
from pydantic import BaseModel

RecordT = TypeVar("RecordT", bound=BaseModel, covariant=True)


@runtime_checkable
class CollectionFetcher(Protocol[RecordT]):
    """Minimal contract for one producer of the fan-out.

    Design rules:
    - `fetch` is async because it performs HTTP I/O.
    - It returns the whole collection in source order, or raises
      `core.errors.FetchError`.
    """

    resource: str

    async def fetch(self, client: httpx.AsyncClient) -> Sequence[RecordT]:
        """Download and decode the collection."""

        ...

"""Generic JSON-array fetcher.

Every endpoint of the fan-out answers with a JSON array of one record
shape, so a single implementation parameterized by the record model covers
users, posts and comments.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Generic, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from core.errors import FetchError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class JsonArrayFetcher(Generic[RecordT]):
    """GET one URL and decode its JSON array into `list[model]`.

    Source order is preserved. Any failure (transport, status, body,
    validation) is raised as `FetchError` with the cause chained; nothing
    here terminates the process.
    """

    resource: ClassVar[str]
    model: ClassVar[type[BaseModel]]

    def __init__(self, url: str) -> None:
        self.url = url
        self._adapter = TypeAdapter(list[self.model])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(url={self.url!r})"

    async def fetch(self, client: httpx.AsyncClient) -> list[RecordT]:
        logger.debug("Fetching %s from %s", self.resource, self.url)
        try:
            resp = await client.get(self.url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                self.resource, self.url, f"HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(self.resource, self.url, str(exc) or exc.__class__.__name__) from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise FetchError(self.resource, self.url, f"invalid JSON body: {exc}") from exc

        if not isinstance(data, list):
            raise FetchError(
                self.resource,
                self.url,
                f"expected a JSON array, got {type(data).__name__}",
            )

        try:
            records = self._adapter.validate_python(data)
        except ValidationError as exc:
            raise FetchError(
                self.resource,
                self.url,
                f"{exc.error_count()} invalid record(s)",
            ) from exc

        logger.info("Fetched %d %s", len(records), self.resource)
        return records

"""Concurrent fetch of the three collections (fan-out/fan-in).

Three producers are registered up front, each resolving its own future on
a shared client; the join point waits for all of them and assembles the
results in a fixed order (users, posts, comments), whatever order the
requests complete in.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

import httpx

from adapters.http_client import build_async_client
from adapters.sources import CommentsFetcher, PostsFetcher, UsersFetcher
from core.config import AppSettings
from core.domain.models import Comment, Post, User
from core.errors import FetchAllError, FetchError
from core.interfaces.fetcher import CollectionFetcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchedData:
    """The three decoded collections, in source order."""

    users: list[User] = field(default_factory=list)
    posts: list[Post] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)

    def __iter__(self) -> Iterator[list]:
        # Allows `users, posts, comments = await fetch_all_data(...)`.
        return iter((self.users, self.posts, self.comments))


def build_fetchers(settings: AppSettings) -> tuple[CollectionFetcher, CollectionFetcher, CollectionFetcher]:
    return (
        UsersFetcher.from_settings(settings),
        PostsFetcher.from_settings(settings),
        CommentsFetcher.from_settings(settings),
    )


async def gather_collections(
    fetchers: Sequence[CollectionFetcher],
    client: httpx.AsyncClient,
) -> list[Sequence]:
    """Run every fetcher concurrently and return their results in input order.

    All fetches are allowed to settle before failures are reported, so the
    caller learns about every broken source at once. Exceptions other than
    `FetchError` are not ours to classify and propagate unchanged.
    """

    results = await asyncio.gather(
        *(fetcher.fetch(client) for fetcher in fetchers),
        return_exceptions=True,
    )

    failures: dict[str, FetchError] = {}
    for fetcher, result in zip(fetchers, results):
        if isinstance(result, FetchError):
            logger.error("Fetch of %s failed: %s", fetcher.resource, result.reason)
            failures[fetcher.resource] = result
        elif isinstance(result, BaseException):
            raise result

    if failures:
        raise FetchAllError(failures)
    return list(results)


async def fetch_all_data(
    *,
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FetchedData:
    fetchers = build_fetchers(settings)
    logger.debug("Starting %d concurrent fetches", len(fetchers))

    async with build_async_client(settings, transport=transport) as client:
        users, posts, comments = await gather_collections(fetchers, client)

    return FetchedData(users=list(users), posts=list(posts), comments=list(comments))

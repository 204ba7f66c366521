from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from core.config import AppSettings

BASE_URL = "https://placeholder.test"

USERS_PAYLOAD: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Alice",
        "username": "alice",
        "email": "alice@example.com",
        "address": {"city": "Gwenborough"},
        "phone": "1-770-736-8031",
    },
    {"id": 2, "name": "Bob", "username": "bob", "email": "bob@example.com"},
    {"id": 3, "name": "Carol", "username": "carol", "email": "carol@example.com"},
]

POSTS_PAYLOAD: list[dict[str, Any]] = [
    {"id": 10, "userId": 1, "title": "first", "body": "a"},
    {"id": 11, "userId": 2, "title": "second", "body": "b"},
    {"id": 12, "userId": 1, "title": "third", "body": "c"},
    {"id": 13, "userId": 99, "title": "orphan", "body": "d"},
]

COMMENTS_PAYLOAD: list[dict[str, Any]] = [
    {"id": 100, "postId": 10, "name": "n1", "email": "x@example.com", "body": "c1"},
    {"id": 101, "postId": 12, "name": "n2", "email": "y@example.com", "body": "c2"},
    {"id": 102, "postId": 10, "name": "n3", "email": "z@example.com", "body": "c3"},
    {"id": 103, "postId": 500, "name": "n4", "email": "w@example.com", "body": "c4"},
]

Route = Callable[[httpx.Request], httpx.Response]


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))


def make_transport(
    overrides: dict[str, Route] | None = None,
    delays: dict[str, float] | None = None,
) -> httpx.MockTransport:
    """Serve the sample payloads; `overrides` replaces a resource's handler."""

    routes: dict[str, Route] = {
        "/users": lambda _: json_response(USERS_PAYLOAD),
        "/posts": lambda _: json_response(POSTS_PAYLOAD),
        "/comments": lambda _: json_response(COMMENTS_PAYLOAD),
    }
    for resource, handler in (overrides or {}).items():
        routes[f"/{resource}"] = handler

    async def handler(request: httpx.Request) -> httpx.Response:
        resource = request.url.path.lstrip("/")
        delay = (delays or {}).get(resource)
        if delay:
            await asyncio.sleep(delay)
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(404)
        return route(request)

    return httpx.MockTransport(handler)


@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    return tmp_path / "out" / "data.json"


@pytest.fixture
def settings(output_path: Path) -> AppSettings:
    return AppSettings(
        users_url=f"{BASE_URL}/users",
        posts_url=f"{BASE_URL}/posts",
        comments_url=f"{BASE_URL}/comments",
        output_path=output_path,
        http_timeout_seconds=5,
    )


@pytest.fixture
def transport_factory() -> Callable[..., httpx.MockTransport]:
    return make_transport

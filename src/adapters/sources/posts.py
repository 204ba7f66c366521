"""Source: posts collection (`userId` links each post to its author)."""

from __future__ import annotations

from adapters.sources.base import JsonArrayFetcher
from core.config import AppSettings
from core.domain.models import Post


class PostsFetcher(JsonArrayFetcher[Post]):
    resource = "posts"
    model = Post

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "PostsFetcher":
        return cls(settings.posts_url)

"""Source: comments collection (`postId` links each comment to its post)."""

from __future__ import annotations

from adapters.sources.base import JsonArrayFetcher
from core.config import AppSettings
from core.domain.models import Comment


class CommentsFetcher(JsonArrayFetcher[Comment]):
    resource = "comments"
    model = Comment

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "CommentsFetcher":
        return cls(settings.comments_url)

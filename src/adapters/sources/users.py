"""Source: users collection."""

from __future__ import annotations

from adapters.sources.base import JsonArrayFetcher
from core.config import AppSettings
from core.domain.models import User


class UsersFetcher(JsonArrayFetcher[User]):
    resource = "users"
    model = User

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "UsersFetcher":
        return cls(settings.users_url)

"""Concrete collection sources.

Why a package:
- One module per endpoint, mirroring the three producers of the fan-out.
- Each class implements `core.interfaces.fetcher.CollectionFetcher`.
"""

from adapters.sources.base import JsonArrayFetcher
from adapters.sources.comments import CommentsFetcher
from adapters.sources.posts import PostsFetcher
from adapters.sources.users import UsersFetcher

__all__ = [
	"CommentsFetcher",
	"JsonArrayFetcher",
	"PostsFetcher",
	"UsersFetcher",
]

"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation of the JSON arrays returned by the endpoints.
- The same models serialize the aggregate to disk and validate it on the
  way back, so the round trip is lossless.

Notes:
- Every model is frozen: entities are built once per run and never mutated.
- Foreign keys keep their JSON names (`userId`, `postId`) on the wire.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

_RECORD_CONFIG = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class User(BaseModel):
    model_config = _RECORD_CONFIG

    id: int = Field(..., description="Unique user identifier.")
    name: str = Field(default="", description="Display name.")
    username: str = Field(default="", description="Login handle.")
    email: str = Field(default="", description="Contact email.")


class Post(BaseModel):
    model_config = _RECORD_CONFIG

    id: int = Field(..., description="Unique post identifier.")
    user_id: int = Field(
        ...,
        alias="userId",
        description="Owner of the post (foreign key to `User.id`).",
    )
    title: str = Field(default="")
    body: str = Field(default="")


class Comment(BaseModel):
    model_config = _RECORD_CONFIG

    id: int = Field(..., description="Unique comment identifier.")
    post_id: int = Field(
        ...,
        alias="postId",
        description="Post being commented (foreign key to `Post.id`).",
    )
    name: str = Field(default="")
    email: str = Field(default="")
    body: str = Field(default="")


class AggregatedPost(BaseModel):
    """A post together with its comments, in input order."""

    model_config = ConfigDict(frozen=True)

    post: Post
    comments: list[Comment] = Field(default_factory=list)


class AggregatedUser(BaseModel):
    """Top-level node of the joined tree: a user owning its posts.

    A user without posts is kept with an empty `posts` list.
    """

    model_config = ConfigDict(frozen=True)

    user: User
    posts: list[AggregatedPost] = Field(default_factory=list)


class DanglingReferences(BaseModel):
    """Children the join drops: their parent is missing or was itself dropped.

    These records are never attached by the join; this model only makes
    them reportable.
    """

    model_config = ConfigDict(frozen=True)

    orphan_posts: list[Post] = Field(default_factory=list)
    orphan_comments: list[Comment] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.orphan_posts) + len(self.orphan_comments)

    @property
    def is_empty(self) -> bool:
        return self.total == 0


class DataSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_users: int = Field(default=0, ge=0)
    total_posts: int = Field(default=0, ge=0)
    total_comments: int = Field(default=0, ge=0)
    user_most_posts: str = Field(
        default="",
        description="Name of the first user with the strictly greatest post count.",
    )
    max_posts: int = Field(default=0, ge=0)

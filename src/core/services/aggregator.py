"""Relational join of users, posts and comments into a nested tree."""

from __future__ import annotations

from collections import defaultdict
from typing import Sequence

from core.domain.models import (
    AggregatedPost,
    AggregatedUser,
    Comment,
    DanglingReferences,
    Post,
    User,
)


def aggregate_data(
    users: Sequence[User],
    posts: Sequence[Post],
    comments: Sequence[Comment],
) -> list[AggregatedUser]:
    """Build one `AggregatedUser` per input user, in input order.

    Posts are bucketed by `user_id` and comments by `post_id`, each bucket
    keeping input order. Children whose parent is not in the input land in
    a bucket nobody reads and are therefore absent from the result; use
    `find_dangling_references` to report them.
    """

    posts_by_user: dict[int, list[Post]] = defaultdict(list)
    for post in posts:
        posts_by_user[post.user_id].append(post)

    comments_by_post: dict[int, list[Comment]] = defaultdict(list)
    for comment in comments:
        comments_by_post[comment.post_id].append(comment)

    result: list[AggregatedUser] = []
    for user in users:
        user_posts = [
            AggregatedPost(post=post, comments=list(comments_by_post.get(post.id, ())))
            for post in posts_by_user.get(user.id, ())
        ]
        result.append(AggregatedUser(user=user, posts=user_posts))
    return result


def find_dangling_references(
    users: Sequence[User],
    posts: Sequence[Post],
    comments: Sequence[Comment],
) -> DanglingReferences:
    """Everything `aggregate_data` leaves out of the tree.

    Posts with an unknown author, and comments whose post is either unknown
    or one of those orphan posts: both kinds never reach the output.
    """

    user_ids = {user.id for user in users}
    orphan_posts: list[Post] = []
    attached_post_ids: set[int] = set()
    for post in posts:
        if post.user_id in user_ids:
            attached_post_ids.add(post.id)
        else:
            orphan_posts.append(post)

    return DanglingReferences(
        orphan_posts=orphan_posts,
        orphan_comments=[c for c in comments if c.post_id not in attached_post_ids],
    )

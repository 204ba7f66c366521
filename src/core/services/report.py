"""Summary statistics over a (re-read) aggregate."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from core.domain.models import AggregatedUser, DataSummary


def summarize(aggregate: Iterable[AggregatedUser]) -> DataSummary:
    """Count users, posts and comments in one pass.

    The "most posts" user is the first one with a strictly greater count,
    so ties keep whoever comes first. With no posts at all the name stays
    empty.
    """

    total_users = 0
    total_posts = 0
    total_comments = 0
    user_most_posts = ""
    max_posts = 0

    for entry in aggregate:
        total_users += 1
        num_posts = len(entry.posts)
        total_posts += num_posts
        if num_posts > max_posts:
            max_posts = num_posts
            user_most_posts = entry.user.name
        for post in entry.posts:
            total_comments += len(post.comments)

    return DataSummary(
        total_users=total_users,
        total_posts=total_posts,
        total_comments=total_comments,
        user_most_posts=user_most_posts,
        max_posts=max_posts,
    )


def format_summary(summary: DataSummary, source: Path | str) -> str:
    """Render the summary; the file name is quoted with JSON string escaping."""

    lines = [
        f"Summary of data for file {json.dumps(str(source), ensure_ascii=False)}:",
        f"Total users: {summary.total_users}",
        f"Total posts: {summary.total_posts}",
        f"Total comments: {summary.total_comments}",
        f"User with most posts: {summary.user_most_posts} ({summary.max_posts} posts)",
    ]
    return "\n".join(lines)

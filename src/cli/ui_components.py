"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets several commands reuse the same tables/panels.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.models import DanglingReferences
from core.errors import FetchAllError

_MAX_LISTED = 10


def build_fetch_errors_table(error: FetchAllError) -> Table:
    """One row per failed source."""

    table = Table(title="Fetch failed", title_style="bold red")
    table.add_column("Resource", style="cyan", no_wrap=True)
    table.add_column("URL", style="magenta")
    table.add_column("Error", style="red")
    for resource, failure in error.failures.items():
        table.add_row(resource, failure.url, failure.reason)
    return table


def build_dangling_panel(dangling: DanglingReferences) -> Panel:
    """Warning panel listing records dropped by the join."""

    body = Text()
    if dangling.orphan_posts:
        body.append(f"Posts without a known user: {len(dangling.orphan_posts)}\n", style="bold")
        for post in dangling.orphan_posts[:_MAX_LISTED]:
            body.append(f"- post {post.id} (userId={post.user_id})\n")
    if dangling.orphan_comments:
        body.append(f"Comments without an attached post: {len(dangling.orphan_comments)}\n", style="bold")
        for comment in dangling.orphan_comments[:_MAX_LISTED]:
            body.append(f"- comment {comment.id} (postId={comment.post_id})\n")
    if len(dangling.orphan_posts) > _MAX_LISTED or len(dangling.orphan_comments) > _MAX_LISTED:
        body.append("(lists truncated)", style="dim")

    return Panel(body, title=Text("Dangling references", style="bold yellow"), border_style="yellow")


def build_settings_table(settings: AppSettings) -> Table:
    table = Table(title="Effective configuration")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("users_url", settings.users_url)
    table.add_row("posts_url", settings.posts_url)
    table.add_row("comments_url", settings.comments_url)
    table.add_row("output_path", str(settings.output_path))
    table.add_row("http_timeout_seconds", f"{settings.http_timeout_seconds:g}")
    table.add_row("log_level", settings.log_level)
    return table

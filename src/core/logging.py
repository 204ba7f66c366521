"""Logging setup.

Rich renders log records on stderr so stdout stays reserved for the summary.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "placeholder-join"


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Install a single `RichHandler` on the root logger and set its level.

    Calling it again only updates the levels.
    """

    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)

    # httpx logs every request at INFO; only show them at DEBUG.
    httpx_level = logging.NOTSET if root.level <= logging.DEBUG else logging.WARNING
    logging.getLogger("httpx").setLevel(httpx_level)

    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return root

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    return root

"""JSON export/import of the aggregate.

Why JSON:
- Human-readable (indented) snapshot of the joined tree.
- The file is the hand-off between the write step and the analysis step:
  the summary is computed from what was actually persisted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

from pydantic import TypeAdapter, ValidationError

from core.domain.models import AggregatedUser
from core.errors import PersistenceError

logger = logging.getLogger(__name__)

_AGGREGATE_ADAPTER = TypeAdapter(list[AggregatedUser])


def export_aggregate_json(*, aggregate: Sequence[AggregatedUser], output_path: Path) -> Path:
    """Write the aggregate as indented UTF-8 JSON, truncating any previous content."""

    try:
        payload = _AGGREGATE_ADAPTER.dump_python(list(aggregate), mode="json", by_alias=True)
        text = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        raise PersistenceError(output_path, "write", str(exc)) from exc

    logger.info("JSON file saved: %s", output_path)
    return output_path


def load_aggregate_json(path: Path) -> list[AggregatedUser]:
    """Read back a file produced by `export_aggregate_json`."""

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise PersistenceError(path, "read", str(exc)) from exc

    try:
        return _AGGREGATE_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise PersistenceError(path, "parse", f"{exc.error_count()} validation error(s)") from exc

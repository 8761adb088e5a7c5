from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Iterable

from pydantic import TypeAdapter

from jobfeed.schemas.job import JobRecord

logger = logging.getLogger(__name__)

_RECORD_LIST = TypeAdapter(list[JobRecord])


def persist_records(records: Iterable[JobRecord], path: str | Path) -> tuple[bool, str]:
    """Write records to ``path`` as one JSON array.

    Markup in descriptions is written as-is. Errors are returned, not raised,
    so a failed write never discards the records already collected.
    """
    out_path = Path(path).expanduser()
    data = [record.to_output() for record in records]
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to write %s: %s", out_path, exc)
        return False, str(exc)
    return True, f"wrote {len(data)} records to {out_path}"


def load_records(path: str | Path) -> list[JobRecord]:
    return _RECORD_LIST.validate_json(Path(path).read_bytes())

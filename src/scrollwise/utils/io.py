"""Readers and writers for watch-event files, configs and reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import yaml


def load_jsonl(path: Path) -> Iterator[Dict[str, Any]]:
    """Yield one object per non-blank line of a JSON Lines file."""
    with path.open("r", encoding="utf-8") as stream:
        for number, line in enumerate(stream, start=1):
            line = line.strip()
            if not line:
                continue
            record = json.loads(line)
            if not isinstance(record, dict):
                msg = f"{path}:{number}: expected a JSON object per line"
                raise TypeError(msg)
            yield record


def load_yaml_or_json(path: Path) -> Any:
    """Parse ``path`` as YAML for ``.yaml``/``.yml`` suffixes, JSON otherwise."""
    with path.open("r", encoding="utf-8") as stream:
        if path.suffix.lower() in {".yaml", ".yml"}:
            return yaml.safe_load(stream)
        return json.load(stream)


def load_records(path: Path, key: str = "events") -> List[Dict[str, Any]]:
    """Load a list of records from JSONL, or from a JSON/YAML list.

    A mapping payload must keep its records under ``key``.
    """
    path = Path(path)
    if path.suffix.lower() == ".jsonl":
        return list(load_jsonl(path))
    data = load_yaml_or_json(path)
    if isinstance(data, dict):
        records = data.get(key, [])
        if isinstance(records, list):
            return records
        msg = f"Expected {key!r} list in payload"
        raise TypeError(msg)
    if isinstance(data, list):
        return data
    msg = f"Unsupported format; expected list or mapping with {key!r}"
    raise TypeError(msg)


def save_json(path: Path, data: Any, *, indent: int = 2) -> None:
    """Write ``data`` to ``path`` as UTF-8 JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as stream:
        json.dump(data, stream, indent=indent, ensure_ascii=False)
        stream.write("\n")

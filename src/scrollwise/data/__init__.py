"""Bundled data for the Scrollwise package."""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict, List

from ..events import WatchEvent


def load_sample_records() -> List[Dict[str, Any]]:
    with resources.files(__package__).joinpath("sample_history.json").open("r", encoding="utf-8") as stream:
        return json.load(stream)


def load_sample_history() -> List[WatchEvent]:
    return [WatchEvent.from_dict(record) for record in load_sample_records()]


__all__ = ["load_sample_history", "load_sample_records"]

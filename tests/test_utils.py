from __future__ import annotations

import json
from pathlib import Path

import pytest

from scrollwise.utils import load_records, lower_tokens, split_words


def test_split_words_lowercases_on_whitespace() -> None:
    assert split_words("How to  make\tPasta") == ["how", "to", "make", "pasta"]
    assert split_words("") == []
    assert lower_tokens(["A", "b", "A"]) == ["a", "b", "a"]


def test_load_records_reads_yaml_mapping(workspace: Path) -> None:
    path = workspace / "events.yaml"
    path.write_text("events:\n  - title: clip\n    watch_seconds: 9\n    video_seconds: 10\n", encoding="utf8")
    assert load_records(path) == [{"title": "clip", "watch_seconds": 9, "video_seconds": 10}]


def test_load_records_rejects_non_object_lines(workspace: Path) -> None:
    path = workspace / "events.jsonl"
    path.write_text(json.dumps({"title": "ok"}) + "\n\n" + json.dumps([1]) + "\n", encoding="utf8")
    with pytest.raises(TypeError):
        load_records(path)

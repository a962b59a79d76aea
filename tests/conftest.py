from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Callable

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from scrollwise.data import load_sample_history
from scrollwise.events import WatchEvent
from scrollwise.feed import FeedEngine


@pytest.fixture
def sample_history() -> list[WatchEvent]:
    return load_sample_history()


@pytest.fixture
def sample_engine(sample_history: list[WatchEvent]) -> FeedEngine:
    engine = FeedEngine()
    for event in sample_history:
        engine.add_watch(event)
    return engine


def _make_event(
    title: str = "video",
    tags: tuple[str, ...] = (),
    *,
    watch: float = 60.0,
    length: float = 60.0,
    liked: bool = False,
    disliked: bool = False,
    sequence: int = 1,
) -> WatchEvent:
    return WatchEvent(
        watch_seconds=watch,
        video_seconds=length,
        title=title,
        tags=tags,
        liked=liked,
        disliked=disliked,
        sequence=sequence,
    )


EventFactory = Callable[..., WatchEvent]


@pytest.fixture
def make_event() -> EventFactory:
    return _make_event


@pytest.fixture
def workspace(tmp_path: Path) -> Iterator[Path]:
    yield tmp_path

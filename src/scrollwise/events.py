"""Watch event records shared by the guardrail and the feed engine."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .utils import lower_tokens, split_words

_ALIASES = {
    "watch_time": "watch_seconds",
    "video_length": "video_seconds",
    "video_name": "title",
    "hashtags": "tags",
    "watched_at": "sequence",
}


@dataclass(frozen=True)
class WatchEvent:
    """One finished (or abandoned) viewing of a single video.

    ``liked`` and ``disliked`` are independent flags; nothing here stops both
    from being set, so callers are expected to keep them exclusive.
    """

    watch_seconds: float
    video_seconds: float
    title: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    liked: bool = False
    disliked: bool = False
    sequence: int = 0

    def __post_init__(self) -> None:
        # Accept any sequence of tags but store an immutable copy.
        object.__setattr__(self, "tags", tuple(self.tags))

    @property
    def attention_ratio(self) -> float:
        if self.video_seconds == 0:
            return 0.0
        return self.watch_seconds / self.video_seconds

    @property
    def title_words(self) -> List[str]:
        return split_words(self.title)

    @property
    def normalised_tags(self) -> List[str]:
        return lower_tokens(self.tags)

    @property
    def tokens(self) -> List[str]:
        """Title words followed by tags, lowercased, each counted once."""
        return self.title_words + self.normalised_tags

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WatchEvent:
        payload = {_ALIASES.get(key, key): value for key, value in data.items()}
        tags = payload.get("tags", [])
        if isinstance(tags, str) or not isinstance(tags, Sequence):
            msg = f"Expected a list of tags, got {type(tags).__name__}"
            raise TypeError(msg)
        return cls(
            watch_seconds=float(payload["watch_seconds"]),
            video_seconds=float(payload["video_seconds"]),
            title=str(payload["title"]),
            tags=tuple(str(tag) for tag in tags),
            liked=bool(payload.get("liked", False)),
            disliked=bool(payload.get("disliked", False)),
            sequence=int(payload.get("sequence", 0)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "watch_seconds": self.watch_seconds,
            "video_seconds": self.video_seconds,
            "title": self.title,
            "tags": list(self.tags),
            "liked": self.liked,
            "disliked": self.disliked,
            "sequence": self.sequence,
        }

"""Configuration helpers for Scrollwise."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional, cast

import yaml

from .logging import get_logger
from .utils import load_yaml_or_json

LOGGER = get_logger(__name__)

SELECTION_STRATEGIES = ("rotate", "random")


@dataclass
class GuardrailConfig:
    """Thresholds for the attention guardrail."""

    qualifying_seconds: float = 7.0
    hard_limit_minutes: float = 20.0
    doomscroll_minutes: float = 8.0
    low_attention: float = 0.25
    base_break_minutes: float = 5.0
    default_attention: float = 1.0


@dataclass
class FeedConfig:
    """Configuration for the feed engine."""

    max_recency_repeats: int = 3
    fallback_term: str = "trending"
    default_word_count: int = 8
    selection: str = "rotate"
    random_state: Optional[int] = None

    def __post_init__(self) -> None:
        if self.selection not in SELECTION_STRATEGIES:
            msg = f"Unknown selection strategy {self.selection!r}; expected one of {SELECTION_STRATEGIES}"
            raise ValueError(msg)


@dataclass
class ScrollwiseConfig:
    """Top-level configuration for a viewing session."""

    guardrail: GuardrailConfig = field(default_factory=GuardrailConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)
    hour: int = 12
    break_override: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ScrollwiseConfig:
        return cls(
            guardrail=GuardrailConfig(**(data.get("guardrail") or {})),
            feed=FeedConfig(**(data.get("feed") or {})),
            hour=int(data.get("hour", 12)),
            break_override=data.get("break_override"),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def save(self, path: Path) -> None:
        """Write the configuration as YAML or JSON depending on ``path``."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf8") as handle:
            if path.suffix.lower() in {".yaml", ".yml"}:
                yaml.safe_dump(self.to_dict(), handle, sort_keys=False)
            else:
                json.dump(self.to_dict(), handle, indent=2)


def _load_mapping(path: Path) -> dict[str, Any]:
    loaded = load_yaml_or_json(path)
    if loaded is None:
        return {}
    if isinstance(loaded, Mapping):
        return cast(dict[str, Any], dict(loaded))
    msg = f"Expected mapping at root of configuration {path}"
    raise TypeError(msg)


def _merge_dict(base: dict[str, Any], overrides: Iterable[dict[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for override in overrides:
        for key, value in override.items():
            existing = result.get(key)
            if isinstance(value, dict) and isinstance(existing, dict):
                nested = _merge_dict(cast(dict[str, Any], existing), [value])
                result[key] = nested
            else:
                result[key] = value
    return result


def load_config(
    path: Optional[Path] = None,
    overrides: Optional[Iterable[dict[str, Any]]] = None,
) -> ScrollwiseConfig:
    """Load configuration from disk and merge overrides."""

    overrides = list(overrides or [])
    if path is None:
        base: dict[str, Any] = {}
    else:
        base = _load_mapping(Path(path))
        LOGGER.info("Loaded configuration from %s", path)

    merged = _merge_dict(base, overrides)
    return ScrollwiseConfig.from_dict(merged)

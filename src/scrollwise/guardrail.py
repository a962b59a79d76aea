"""Wellbeing guardrail that decides when a viewer should take a break."""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from .config import GuardrailConfig
from .events import WatchEvent
from .logging import get_logger

LOGGER = get_logger(__name__)


class AttentionGuardrail:
    """Track session engagement and apply the break policy.

    Events shorter than ``qualifying_seconds`` are treated as scroll-pasts and
    ignored. ``reset_daily`` clears attention samples but keeps session time.
    """

    def __init__(
        self,
        hour: int,
        break_override: Optional[float] = None,
        config: GuardrailConfig | None = None,
    ) -> None:
        self.config = config or GuardrailConfig()
        self._hour = hour
        self._break_override = break_override
        self._attention: List[float] = []
        self.session_seconds = 0.0

    # Recording -------------------------------------------------------------------
    def record(self, event: WatchEvent) -> None:
        if event.watch_seconds < self.config.qualifying_seconds:
            LOGGER.debug("Ignoring %.1fs watch of %r", event.watch_seconds, event.title)
            return
        self._attention.append(event.attention_ratio)
        self.session_seconds += event.watch_seconds

    def reset_daily(self) -> None:
        self._attention.clear()

    # Queries ---------------------------------------------------------------------
    @property
    def hour(self) -> int:
        return self._hour

    @property
    def break_override(self) -> Optional[float]:
        return self._break_override

    @break_override.setter
    def break_override(self, minutes: Optional[float]) -> None:
        self._break_override = minutes

    @property
    def attention_history(self) -> Sequence[float]:
        return tuple(self._attention)

    @property
    def session_minutes(self) -> float:
        return self.session_seconds / 60.0

    def average_attention(self) -> float:
        if not self._attention:
            return self.config.default_attention
        return float(np.mean(self._attention))

    def break_length_minutes(self) -> float:
        if self._break_override is not None:
            return self._break_override
        base = self.config.base_break_minutes
        return base + base * (self._hour / 24.0)

    def should_break(self) -> bool:
        minutes = self.session_minutes
        if minutes > self.config.hard_limit_minutes:
            return True
        if self.average_attention() < self.config.low_attention and minutes > self.config.doomscroll_minutes:
            LOGGER.debug("Low attention %.2f after %.1f minutes", self.average_attention(), minutes)
            return True
        return False

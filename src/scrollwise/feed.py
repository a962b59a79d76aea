"""Feed engine that turns watch history into the next search query."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence

from .algorithms import RandomSelector, SuccessorSelector, build_chain, rotating_selector, top_terms, walk
from .config import FeedConfig
from .events import WatchEvent
from .logging import get_logger

LOGGER = get_logger(__name__)


def selector_from_config(config: FeedConfig) -> SuccessorSelector:
    """Build the successor selection strategy named in ``config``."""
    if config.selection == "random":
        return RandomSelector(config.random_state)
    return rotating_selector


class FeedEngine:
    """Own the watch history and derive search terms from it.

    Disliked videos feed a permanent exclusion set. Their tokens are never
    emitted again, even when a later liked video carries the same tag.
    """

    def __init__(
        self,
        config: FeedConfig | None = None,
        selector: Optional[SuccessorSelector] = None,
    ) -> None:
        self.config = config or FeedConfig()
        self.selector = selector or selector_from_config(self.config)
        self._history: List[WatchEvent] = []
        # dict keys double as an insertion-ordered set
        self._excluded: Dict[str, None] = {}

    # Ingestion -------------------------------------------------------------------
    def add_watch(self, event: WatchEvent) -> None:
        if event.disliked:
            for token in event.normalised_tags + event.title_words:
                if token not in self._excluded:
                    self._excluded[token] = None
                    LOGGER.debug("Excluding %r", token)
        self._history.append(event)

    @property
    def history(self) -> Sequence[WatchEvent]:
        return tuple(self._history)

    @property
    def excluded_terms(self) -> Sequence[str]:
        return tuple(self._excluded)

    def is_excluded(self, token: str) -> bool:
        return token.lower() in self._excluded

    # Term extraction -------------------------------------------------------------
    def extract_words(self) -> List[str]:
        """Return the recency- and like-weighted token stream of the history.

        The event at position ``i`` of ``N`` is repeated ``ceil(i / N * 3)``
        times; liked events emit their tags twice per repeat.
        """

        words: List[str] = []
        total = len(self._history)
        for position, event in enumerate(self._history, start=1):
            if event.disliked:
                continue
            repeats = math.ceil(position / total * self.config.max_recency_repeats)
            title_words = [word for word in event.title_words if word not in self._excluded]
            tags = [tag for tag in event.normalised_tags if tag not in self._excluded]
            for _ in range(repeats):
                words.extend(title_words)
                words.extend(tags)
                if event.liked:
                    words.extend(tags)
        return words

    # Relevance -------------------------------------------------------------------
    def documents(self) -> List[List[str]]:
        return [event.tokens for event in self._history if not event.disliked]

    def tfidf_top_words(self, n: int) -> List[str]:
        return top_terms(self.documents(), n, self._excluded)

    # Query generation ------------------------------------------------------------
    def generate_query(self, word_count: Optional[int] = None) -> List[str]:
        if word_count is None:
            word_count = self.config.default_word_count
        if not self._history:
            LOGGER.debug("Empty history, falling back to %r", self.config.fallback_term)
            return [self.config.fallback_term]
        words = self.extract_words()
        if not words:
            LOGGER.debug("No usable terms in history, falling back to %r", self.config.fallback_term)
            return [self.config.fallback_term]

        half = word_count // 2
        ranked = self.tfidf_top_words(half)
        chain = build_chain(words)
        start = ranked[0] if ranked else words[0]
        expanded = walk(chain, start, half, self.selector)

        merged: List[str] = []
        for word in ranked + expanded:
            if word not in merged:
                merged.append(word)
        return merged[:word_count]

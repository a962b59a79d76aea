"""Session report combining guardrail state and the next feed query."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from .algorithms import RandomSelector, score_documents
from .feed import FeedEngine
from .guardrail import AttentionGuardrail
from .logging import get_logger
from .utils import save_json

LOGGER = get_logger(__name__)


@dataclass
class TermScore:
    token: str
    score: float


@dataclass
class SessionReport:
    average_attention: float
    session_minutes: float
    needs_break: bool
    break_minutes: float
    query: Sequence[str] = field(default_factory=list)
    excluded_terms: Sequence[str] = field(default_factory=list)
    top_scores: Sequence[TermScore] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "average_attention": self.average_attention,
            "session_minutes": self.session_minutes,
            "needs_break": self.needs_break,
            "break_minutes": self.break_minutes,
            "query": list(self.query),
            "excluded_terms": list(self.excluded_terms),
            "top_scores": [asdict(score) for score in self.top_scores],
        }

    def to_json(self, path: Path) -> None:
        save_json(Path(path), self.to_dict())

    def render_text(self) -> str:
        lines = [
            "=== GUARDRAILS ===",
            f"avg attention:  {self.average_attention * 100:.0f}%",
            f"session so far: {self.session_minutes:.1f} min",
            f"need a break:   {str(self.needs_break).lower()}",
            f"break would be: {self.break_minutes:.1f} min",
            "",
            "=== FEED ===",
            f"search words: {json.dumps(list(self.query))}",
            "",
            "=== DISLIKED ===",
            json.dumps(list(self.excluded_terms)),
        ]
        return "\n".join(lines)


def build_report(
    guardrail: AttentionGuardrail,
    engine: FeedEngine,
    word_count: Optional[int] = None,
    top_k: int = 5,
) -> SessionReport:
    """Snapshot both components without mutating either.

    A random selector is rewound afterwards so later queries are unaffected.
    """

    selector_state = engine.selector.state if isinstance(engine.selector, RandomSelector) else None
    ranking: List[Tuple[str, float]] = score_documents(engine.documents(), set(engine.excluded_terms))
    report = SessionReport(
        average_attention=guardrail.average_attention(),
        session_minutes=guardrail.session_minutes,
        needs_break=guardrail.should_break(),
        break_minutes=guardrail.break_length_minutes(),
        query=engine.generate_query(word_count),
        excluded_terms=list(engine.excluded_terms),
        top_scores=[TermScore(token=token, score=score) for token, score in ranking[:top_k]],
    )
    if selector_state is not None:
        engine.selector.state = selector_state
    LOGGER.debug("Built session report with query %s", report.query)
    return report

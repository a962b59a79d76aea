"""Scrollwise package."""

from .algorithms import RandomSelector, build_chain, rotating_selector, score_documents, walk
from .config import FeedConfig, GuardrailConfig, ScrollwiseConfig, load_config
from .diagnostics import SessionReport, build_report
from .events import WatchEvent
from .feed import FeedEngine
from .guardrail import AttentionGuardrail

__all__ = [
    "AttentionGuardrail",
    "FeedConfig",
    "FeedEngine",
    "GuardrailConfig",
    "RandomSelector",
    "ScrollwiseConfig",
    "SessionReport",
    "WatchEvent",
    "build_chain",
    "build_report",
    "load_config",
    "rotating_selector",
    "score_documents",
    "walk",
]

__version__ = "0.1.0"

"""Scoring and expansion algorithms behind query generation."""

from .markov import Chain, RandomSelector, SuccessorSelector, build_chain, rotating_selector, walk
from .relevance import score_documents, top_terms

__all__ = [
    "Chain",
    "RandomSelector",
    "SuccessorSelector",
    "build_chain",
    "rotating_selector",
    "score_documents",
    "top_terms",
    "walk",
]

"""TF-IDF relevance scoring over watch-history documents.

Every document is the flat token list of one watched video. The score of a
token is ``sum(tf(token, doc) * idf(token))`` over the documents containing it,
where ``tf`` is the in-document frequency and ``idf = ln(N / df)``.

Tokens are laid out in first-seen order (document order, then token order
within a document). Sorting is stable, so ties are broken by that order and
the ranking is reproducible for a fixed history.
"""

from __future__ import annotations

from collections.abc import Container, Sequence
from typing import Dict, List, Tuple

import numpy as np
from numpy.typing import NDArray


def _build_vocabulary(documents: Sequence[Sequence[str]]) -> Dict[str, int]:
    vocabulary: Dict[str, int] = {}
    for document in documents:
        for token in document:
            if token not in vocabulary:
                vocabulary[token] = len(vocabulary)
    return vocabulary


def _count_matrix(documents: Sequence[Sequence[str]], vocabulary: Dict[str, int]) -> NDArray[np.float64]:
    matrix = np.zeros((len(documents), len(vocabulary)), dtype=float)
    for row, document in enumerate(documents):
        for token in document:
            matrix[row, vocabulary[token]] += 1.0
    return matrix


def score_documents(
    documents: Sequence[Sequence[str]],
    excluded: Container[str] = frozenset(),
) -> List[Tuple[str, float]]:
    """Return ``(token, score)`` pairs ranked by descending TF-IDF score.

    Excluded tokens are left out of the ranking but still count towards
    document lengths and document frequencies.
    """

    if not documents:
        return []
    vocabulary = _build_vocabulary(documents)
    if not vocabulary:
        return []
    counts = _count_matrix(documents, vocabulary)
    lengths = counts.sum(axis=1, keepdims=True)
    tf = counts / np.maximum(lengths, 1.0)
    document_frequency = np.count_nonzero(counts, axis=0)
    idf = np.log(len(documents) / document_frequency)
    scores = (tf * idf).sum(axis=0)

    order = np.argsort(-scores, kind="stable")
    tokens = list(vocabulary)
    return [(tokens[index], float(scores[index])) for index in order if tokens[index] not in excluded]


def top_terms(
    documents: Sequence[Sequence[str]],
    n: int,
    excluded: Container[str] = frozenset(),
) -> List[str]:
    """Return the ``n`` highest scoring tokens."""
    if n <= 0:
        return []
    return [token for token, _ in score_documents(documents, excluded)[:n]]

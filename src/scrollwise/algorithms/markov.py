"""First-order successor chains used to expand a query with related terms."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Dict, List, Protocol

import numpy as np

from ..logging import get_logger

LOGGER = get_logger(__name__)

Chain = Dict[str, List[str]]


class SuccessorSelector(Protocol):
    """Pick the next token from ``successors`` at walk step ``step``."""

    def __call__(self, successors: Sequence[str], step: int) -> str: ...


def rotating_selector(successors: Sequence[str], step: int) -> str:
    """Deterministically cycle through the successors by step index."""
    return successors[step % len(successors)]


def _ensure_rng(seed: int | np.random.Generator | None) -> np.random.Generator:
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(seed)


class RandomSelector:
    """Draw a successor uniformly at random.

    Successor lists keep duplicates, so frequent successors are proportionally
    more likely to be drawn.
    """

    def __init__(self, random_state: int | np.random.Generator | None = None) -> None:
        self.rng = _ensure_rng(random_state)

    @property
    def state(self) -> dict:
        return self.rng.bit_generator.state

    @state.setter
    def state(self, value: dict) -> None:
        self.rng.bit_generator.state = value

    def __call__(self, successors: Sequence[str], step: int) -> str:
        return successors[int(self.rng.integers(len(successors)))]


def build_chain(tokens: Sequence[str]) -> Chain:
    """Map each token to the tokens observed directly after it, in order."""
    chain: Chain = {}
    for current, following in zip(tokens, tokens[1:]):
        chain.setdefault(current, []).append(following)
    return chain


def walk(
    chain: Mapping[str, Sequence[str]],
    start: str,
    steps: int,
    selector: SuccessorSelector = rotating_selector,
) -> List[str]:
    """Follow ``chain`` from ``start`` for up to ``steps`` hops.

    The walk stops early at a token with no successors. Tokens the walk
    revisits are not repeated in the result.
    """

    result = [start]
    seen = {start}
    current = start
    for step in range(steps):
        successors = chain.get(current)
        if not successors:
            LOGGER.debug("Walk ended at %r after %d of %d steps", current, step, steps)
            break
        current = selector(successors, step)
        if current not in seen:
            seen.add(current)
            result.append(current)
    return result

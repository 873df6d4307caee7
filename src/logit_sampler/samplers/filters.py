"""Candidate filters: top-k, top-p (nucleus) and min-p.

Each filter overwrites the scores of the tokens it removes with the
excluded marker and leaves the surviving scores untouched. Filters mutate
their input in place.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from logit_sampler.exceptions import InvalidParameterError
from logit_sampler.samplers.base import (
    EXCLUDED,
    Sampler,
    descending_order,
    is_excluded,
    softmax,
)
from logit_sampler.samplers.registry import SamplerRegistry


def _check_open_unit_interval(p: float) -> None:
    if not 0.0 < p < 1.0:
        raise InvalidParameterError(f"p must be between 0 and 1 (exclusive), got {p}")


@SamplerRegistry.register("top_k")
@dataclass(frozen=True, slots=True)
class TopK(Sampler):
    """Keep the *k* highest scores.

    A *k* at least as large as the vector leaves it unchanged. Among equal
    scores the lower index wins.

    Raises:
        InvalidParameterError: If *k* is not positive.
    """

    k: int

    def __post_init__(self) -> None:
        if self.k <= 0:
            raise InvalidParameterError(f"k must be positive, got {self.k}")

    def sample(self, logits: np.ndarray) -> np.ndarray:
        if self.k >= len(logits):
            return logits

        order = descending_order(logits)
        logits[order[self.k :]] = EXCLUDED
        return logits


@SamplerRegistry.register("top_p")
@dataclass(frozen=True, slots=True)
class TopP(Sampler):
    """Nucleus filtering.

    Ranks tokens by probability and keeps the shortest prefix whose
    cumulative probability exceeds *p*. The prefix always holds at least
    one token. Surviving positions keep their original scores, not their
    probabilities.

    Raises:
        InvalidParameterError: If *p* is not in (0, 1).
    """

    p: float

    def __post_init__(self) -> None:
        _check_open_unit_interval(self.p)

    def sample(self, logits: np.ndarray) -> np.ndarray:
        probs = softmax(logits)
        order = descending_order(probs)
        cumulative = np.cumsum(probs[order])

        # Excluded positions sort last and turn the tail of the sum into
        # NaN, which never compares greater than p.
        above = np.flatnonzero(cumulative > self.p)
        if len(above) == 0:
            return logits

        cutoff = int(above[0])
        logits[order[cutoff + 1 :]] = EXCLUDED
        return logits


@SamplerRegistry.register("min_p")
@dataclass(frozen=True, slots=True)
class MinP(Sampler):
    """Drop tokens less likely than ``p * max_probability``.

    A token exactly at the threshold survives.

    Raises:
        InvalidParameterError: If *p* is not in (0, 1).
    """

    p: float

    def __post_init__(self) -> None:
        _check_open_unit_interval(self.p)

    def sample(self, logits: np.ndarray) -> np.ndarray:
        probs = softmax(logits)
        active = ~is_excluded(probs)
        if not np.any(active):
            return logits

        threshold = self.p * np.max(probs[active])
        logits[active & (probs < threshold)] = EXCLUDED
        return logits

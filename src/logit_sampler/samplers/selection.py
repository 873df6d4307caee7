"""Terminal selectors: weighted random draw and greedy argmax.

Both return a one-element float64 array holding the index of the chosen
token in the original vector.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from logit_sampler.exceptions import NoValidTokensError, RandomSourceError, SelectionFailedError
from logit_sampler.randomness.system import SystemRandomSource
from logit_sampler.samplers.base import Sampler, is_excluded, softmax
from logit_sampler.samplers.registry import SamplerRegistry

if TYPE_CHECKING:
    from logit_sampler.randomness.base import RandomSource


def _as_result(index: int) -> np.ndarray:
    return np.array([float(index)], dtype=np.float64)


@SamplerRegistry.register("weighted")
@dataclass(frozen=True, slots=True)
class Weighted(Sampler):
    """Draw one surviving token with probability given by its softmax weight.

    Excluded positions are dropped first; the draw happens over the
    compacted survivors and the result is mapped back to the original index.

    Args:
        random_source: Supplier of uniform values in [0, 1).
    """

    random_source: RandomSource = field(default_factory=SystemRandomSource, compare=False)

    def sample(self, logits: np.ndarray) -> np.ndarray:
        """Select one index.

        Raises:
            NoValidTokensError: If no position survives.
            SelectionFailedError: If the weights are degenerate or the
                random source fails.
        """
        indices = np.flatnonzero(~is_excluded(logits))
        if len(indices) == 0:
            raise NoValidTokensError("no valid tokens found")

        weights = softmax(logits[indices])
        choice = self._draw(weights)
        return _as_result(int(indices[choice]))

    def _draw(self, weights: np.ndarray) -> int:
        """Pick a position in *weights* via CDF binary search.

        Args:
            weights: Non-negative weights, one per candidate.

        Returns:
            Position of the chosen candidate.
        """
        cdf = np.cumsum(weights)
        total = cdf[-1]
        if not np.isfinite(total) or total <= 0.0:
            raise SelectionFailedError("weighted sampler failed: degenerate weights")

        try:
            u = self.random_source.random_uniform()
        except RandomSourceError as exc:
            raise SelectionFailedError(f"weighted sampler failed: {exc}") from exc

        # side="right" never lands on a zero-weight candidate.
        position = int(np.searchsorted(cdf, u * total, side="right"))
        return min(position, len(weights) - 1)


@SamplerRegistry.register("greedy")
@dataclass(frozen=True, slots=True)
class Greedy(Sampler):
    """Select the highest score; ties go to the lowest index.

    A vector with every position excluded has no valid choice and raises
    ``NoValidTokensError``, as Weighted does, rather than returning an
    excluded index.
    """

    def sample(self, logits: np.ndarray) -> np.ndarray:
        """Select the argmax.

        Raises:
            NoValidTokensError: If the vector is empty or fully excluded.
        """
        if len(logits) == 0 or np.all(is_excluded(logits)):
            raise NoValidTokensError("no valid tokens found")
        return _as_result(int(np.nanargmax(logits)))

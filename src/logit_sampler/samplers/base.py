"""Base class for sampling strategies and the shared softmax routine.

Excluded tokens are marked with NaN. Once a position holds the marker it is
never reconsidered, and every numeric routine here ignores it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

EXCLUDED: float = float("nan")
"""Marker written into a position to remove that token from consideration."""


class Sampler(ABC):
    """Abstract base for all sampling strategies.

    A strategy transforms a 1-D score vector into a new vector of the same
    length. Filtering strategies may mutate their input in place; terminal
    strategies return a one-element array holding the selected index.
    """

    __slots__ = ()

    name: str = ""

    @abstractmethod
    def sample(self, logits: np.ndarray) -> np.ndarray:
        """Transform *logits*.

        Args:
            logits: 1-D float64 score vector, NaN marks excluded positions.

        Returns:
            The transformed vector, or ``[index]`` for terminal strategies.

        Raises:
            SamplerError: If the strategy cannot process the vector.
        """


def is_excluded(logits: np.ndarray) -> np.ndarray:
    """Return a boolean mask of the excluded positions in *logits*."""
    return np.isnan(logits)


def softmax(logits: np.ndarray) -> np.ndarray:
    """Convert scores to probabilities without touching the input.

    Normalization runs over the non-excluded positions only; excluded
    positions come out as NaN. Shifting by the max score leaves the result
    unchanged and keeps large finite scores from overflowing.

    Args:
        logits: 1-D score vector, possibly containing excluded positions.

    Returns:
        New probability array of the same shape. Non-excluded entries sum
        to 1.0. An all-excluded input returns an all-NaN copy.
    """
    probs = np.array(logits, dtype=np.float64, copy=True)
    active = ~is_excluded(probs)
    if not np.any(active):
        return probs

    probs -= np.max(probs[active])
    np.exp(probs, out=probs)
    probs /= np.nansum(probs)
    return probs


def descending_order(values: np.ndarray) -> np.ndarray:
    """Return indices that sort *values* in descending order.

    The sort is stable, so equal values keep index order, and excluded
    positions always come last.
    """
    return np.argsort(-values, kind="stable")

"""Pipeline driver that threads a score vector through a chain of samplers.

Each strategy receives the output of its predecessor. The driver copies the
caller's vector once on entry; stages then own that copy and may mutate it.
A temperature of exactly 0 anywhere in the chain stops the run and returns
the greedy choice on the vector as it stands at that point.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from logit_sampler.exceptions import InvalidParameterError
from logit_sampler.samplers.selection import Greedy
from logit_sampler.samplers.temperature import Temperature

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from numpy.typing import ArrayLike

    from logit_sampler.samplers.base import Sampler

logger = logging.getLogger("logit_sampler")


def _is_zero_temperature(sampler: Sampler) -> bool:
    return isinstance(sampler, Temperature) and sampler.is_greedy


class SamplingPipeline:
    """Ordered, reusable chain of samplers.

    The pipeline holds no state between calls. It does not reorder or
    validate the chain; a sensible order is usually temperature, top-k,
    top-p or min-p, then a terminal selector.
    """

    def __init__(self, samplers: Iterable[Sampler] = ()) -> None:
        self._samplers: tuple[Sampler, ...] = tuple(samplers)

    @property
    def samplers(self) -> Sequence[Sampler]:
        """The configured strategies, in run order."""
        return self._samplers

    def __len__(self) -> int:
        return len(self._samplers)

    def __repr__(self) -> str:
        chain = " -> ".join(repr(s) for s in self._samplers) or "(empty)"
        return f"SamplingPipeline({chain})"

    def run(self, logits: ArrayLike) -> np.ndarray:
        """Run every stage over a copy of *logits*.

        Args:
            logits: 1-D sequence of scores, one per vocabulary token.

        Returns:
            The filtered vector (original length, NaN marks excluded
            tokens), or a one-element array holding the selected index if a
            terminal selector ran.

        Raises:
            InvalidParameterError: If *logits* is not one-dimensional.
            SamplerError: The first error raised by any stage, unchanged.
        """
        current = np.array(logits, dtype=np.float64, copy=True)
        if current.ndim != 1:
            raise InvalidParameterError(f"logits must be 1-D, got shape {current.shape}")

        for position, sampler in enumerate(self._samplers):
            if _is_zero_temperature(sampler):
                logger.debug("stage %d: temperature=0, short-circuit to greedy", position)
                return Greedy().sample(current)
            current = sampler.sample(current)
            logger.debug("stage %d: %r -> %d values", position, sampler, len(current))
        return current

    __call__ = run


def sample(logits: ArrayLike, *samplers: Sampler) -> np.ndarray:
    """Run *logits* through *samplers* in order.

    Convenience wrapper around :class:`SamplingPipeline`.

    Example::

        sample(logits, Temperature(0.7), TopK(40), TopP(0.9), Weighted())
    """
    return SamplingPipeline(samplers).run(logits)

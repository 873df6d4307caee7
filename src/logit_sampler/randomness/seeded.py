"""Seeded pseudo-random source for reproducible sampling and tests."""

from __future__ import annotations

import numpy as np

from logit_sampler.randomness.base import RandomSource
from logit_sampler.randomness.registry import register_random_source


@register_random_source("seeded")
class SeededRandomSource(RandomSource):
    """NumPy ``Generator`` backed source.

    The same seed always yields the same sequence of values.

    Args:
        seed: Optional RNG seed. ``None`` seeds from the OS.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def name(self) -> str:
        """Return ``'seeded'``."""
        return "seeded"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    @property
    def seed(self) -> int | None:
        """The seed this source was created with."""
        return self._seed

    def random_uniform(self) -> float:
        """Return the next float in [0, 1) from the generator."""
        return float(self._rng.random())

    def close(self) -> None:
        """No-op, no resources to release."""

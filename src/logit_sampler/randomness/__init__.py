"""Randomness subsystem for logit-sampler.

Sources of uniform values consumed by weighted token selection.
"""

from logit_sampler.randomness.base import RandomSource
from logit_sampler.randomness.registry import RandomSourceRegistry, register_random_source
from logit_sampler.randomness.seeded import SeededRandomSource
from logit_sampler.randomness.system import SystemRandomSource

__all__ = [
    "RandomSource",
    "RandomSourceRegistry",
    "SeededRandomSource",
    "SystemRandomSource",
    "register_random_source",
]

"""Sampling strategies for logit-sampler.

Filters (temperature, top-k, top-p, min-p, softmax) reshape a score vector
and mark removed tokens with NaN; terminal selectors (weighted, greedy)
reduce it to a single token index.
"""

from logit_sampler.samplers.base import EXCLUDED, Sampler, is_excluded, softmax
from logit_sampler.samplers.filters import MinP, TopK, TopP
from logit_sampler.samplers.registry import SamplerRegistry
from logit_sampler.samplers.selection import Greedy, Weighted
from logit_sampler.samplers.softmax import Softmax
from logit_sampler.samplers.temperature import Temperature

__all__ = [
    "EXCLUDED",
    "Greedy",
    "MinP",
    "Sampler",
    "SamplerRegistry",
    "Softmax",
    "Temperature",
    "TopK",
    "TopP",
    "Weighted",
    "is_excluded",
    "softmax",
]

"""Softmax as a pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from logit_sampler.samplers.base import Sampler, softmax
from logit_sampler.samplers.registry import SamplerRegistry

if TYPE_CHECKING:
    import numpy as np


@SamplerRegistry.register("softmax")
@dataclass(frozen=True, slots=True)
class Softmax(Sampler):
    """Replace scores with probabilities. Excluded positions stay excluded."""

    def sample(self, logits: np.ndarray) -> np.ndarray:
        return softmax(logits)

"""Temperature scaling.

Rescales scores in place as ``(x - max) / max(T, eps)``. The shift by the
maximum does not change the softmax of the result.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from logit_sampler.exceptions import InvalidParameterError
from logit_sampler.samplers.base import Sampler, is_excluded
from logit_sampler.samplers.registry import SamplerRegistry

MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 2.0

# Floor for the divisor. A temperature of exactly 0 is handled by the
# pipeline as greedy selection and never reaches the division.
TEMPERATURE_EPSILON = 1e-7


@SamplerRegistry.register("temperature")
@dataclass(frozen=True, slots=True)
class Temperature(Sampler):
    """Divide shifted scores by the temperature.

    Lower values sharpen the distribution, higher values flatten it.

    Args:
        value: Temperature in the inclusive range [0, 2].

    Raises:
        InvalidParameterError: If *value* is outside [0, 2].
    """

    value: float

    def __post_init__(self) -> None:
        if not MIN_TEMPERATURE <= self.value <= MAX_TEMPERATURE:
            raise InvalidParameterError(
                f"temperature must be between {MIN_TEMPERATURE:g} and "
                f"{MAX_TEMPERATURE:g}, got {self.value}"
            )

    @property
    def is_greedy(self) -> bool:
        """True when this temperature requests deterministic selection."""
        return self.value == 0

    def sample(self, logits: np.ndarray) -> np.ndarray:
        active = ~is_excluded(logits)
        if not np.any(active):
            return logits

        max_logit = np.max(logits[active])
        logits -= max_logit
        logits /= max(float(self.value), TEMPERATURE_EPSILON)
        return logits

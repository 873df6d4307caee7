"""System randomness source using ``os.urandom()``.

This is the default source. It is cryptographically secure and always
available, but not reproducible.
"""

from __future__ import annotations

import os

from logit_sampler.exceptions import RandomSourceError
from logit_sampler.randomness.base import RandomSource
from logit_sampler.randomness.registry import register_random_source

# A float64 mantissa holds 53 bits.
_MANTISSA_BITS = 53


@register_random_source("system")
class SystemRandomSource(RandomSource):
    """``os.urandom()`` wrapper producing 53-bit uniform floats."""

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def random_uniform(self) -> float:
        """Return a float in [0, 1) built from 8 bytes of OS entropy.

        Raises:
            RandomSourceError: If the OS cannot provide random bytes.
        """
        try:
            raw = os.urandom(8)
        except OSError as exc:
            raise RandomSourceError(f"os.urandom failed: {exc}") from exc
        bits = int.from_bytes(raw, "big") >> (64 - _MANTISSA_BITS)
        return bits / (1 << _MANTISSA_BITS)

    def close(self) -> None:
        """No-op, no resources to release."""

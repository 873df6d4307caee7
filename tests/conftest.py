"""Shared pytest fixtures for logit-sampler tests.

Provides reusable configuration objects, seeded randomness sources, and
sample logit arrays that are used across multiple test modules.
"""

from __future__ import annotations

import numpy as np
import pytest

from logit_sampler.config import SamplerConfig
from logit_sampler.randomness.seeded import SeededRandomSource


@pytest.fixture
def default_config() -> SamplerConfig:
    """Return a SamplerConfig with all default values, ignoring any .env file."""
    return SamplerConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def silent_config() -> SamplerConfig:
    """Return a config with no logging for noise-free tests."""
    return SamplerConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> SamplerConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return SamplerConfig(  # type: ignore[call-arg]
        _env_file=None,
        log_level="full",
        diagnostic_mode=True,
    )


@pytest.fixture
def seeded_source() -> SeededRandomSource:
    """Return a SeededRandomSource with a fixed seed for reproducibility."""
    return SeededRandomSource(seed=42)


@pytest.fixture
def sample_logits() -> np.ndarray:
    """Return five strictly decreasing logits."""
    return np.array([5.0, 4.0, 3.0, 2.0, 1.0])


@pytest.fixture
def sample_logits_peaked() -> np.ndarray:
    """Return logits with one dominant token (index 0).

    Token 0 has logit 10.0; all others have logit 0.0.
    After softmax, token 0 has ~99.5% probability. Vocab size = 100.
    """
    logits = np.zeros(100, dtype=np.float64)
    logits[0] = 10.0
    return logits


@pytest.fixture
def sample_logits_large_vocab() -> np.ndarray:
    """Return random logits for a larger vocabulary (32000).

    Uses a fixed RNG seed for reproducibility.
    """
    rng = np.random.default_rng(seed=12345)
    return rng.standard_normal(32000).astype(np.float64)

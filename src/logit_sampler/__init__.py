"""logit-sampler: turn a language model's logits into the next token.

Composable strategies (temperature, top-k, top-p, min-p, softmax) reshape a
score vector; terminal selectors (weighted draw, greedy argmax) pick one
token. A pipeline driver threads the vector through an ordered chain.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("logit-sampler")
except PackageNotFoundError:
    __version__ = "0.0.0"

from logit_sampler.config import SamplerConfig, build_samplers, resolve_config, validate_overrides
from logit_sampler.exceptions import (
    ConfigValidationError,
    InvalidParameterError,
    NoValidTokensError,
    RandomSourceError,
    SamplerError,
    SelectionFailedError,
    TokenSelectionError,
)
from logit_sampler.pipeline import SamplingPipeline, sample
from logit_sampler.samplers import (
    EXCLUDED,
    Greedy,
    MinP,
    Sampler,
    Softmax,
    Temperature,
    TopK,
    TopP,
    Weighted,
    softmax,
)
from logit_sampler.selector import LogitSampler, SelectionResult

__all__ = [
    "EXCLUDED",
    "ConfigValidationError",
    "Greedy",
    "InvalidParameterError",
    "LogitSampler",
    "MinP",
    "NoValidTokensError",
    "RandomSourceError",
    "Sampler",
    "SamplerConfig",
    "SamplerError",
    "SamplingPipeline",
    "SelectionFailedError",
    "SelectionResult",
    "Softmax",
    "Temperature",
    "TokenSelectionError",
    "TopK",
    "TopP",
    "Weighted",
    "__version__",
    "build_samplers",
    "resolve_config",
    "sample",
    "softmax",
]

"""High-level token selector: configuration in, one token index out.

Orchestrates a single selection:
    overrides -> resolved config -> sampler chain -> pipeline -> record.
"""

from __future__ import annotations

import hashlib
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from logit_sampler.config import SamplerConfig, build_samplers, resolve_config
from logit_sampler.logging.logger import SamplingLogger
from logit_sampler.logging.types import SelectionRecord
from logit_sampler.pipeline import SamplingPipeline
from logit_sampler.randomness.registry import RandomSourceRegistry
from logit_sampler.samplers.base import is_excluded
from logit_sampler.samplers.selection import Greedy

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from logit_sampler.randomness.base import RandomSource

logger = logging.getLogger("logit_sampler")


@dataclass(frozen=True, slots=True)
class SelectionResult:
    """Result of one token selection.

    Attributes:
        token_id: Vocabulary index of the selected token.
        num_candidates: Tokens left after filtering (1 for greedy short-circuit).
        greedy: True if the token was chosen by argmax.
        diagnostics: Additional info (chain, timing, config hash).
    """

    token_id: int
    num_candidates: int
    greedy: bool
    diagnostics: dict[str, Any]


def _config_hash(config: SamplerConfig) -> str:
    """Return the first 16 hex characters of the SHA-256 of the config dump."""
    raw = config.model_dump_json().encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:16]


def _build_random_source(config: SamplerConfig) -> RandomSource:
    source_cls = RandomSourceRegistry.get(config.random_source_type)
    if config.random_source_type == "seeded":
        return source_cls(seed=config.seed)  # type: ignore[call-arg]
    return source_cls()


class LogitSampler:
    """Select tokens from score vectors using a configured sampler chain.

    The randomness source is shared across calls; everything else is
    resolved per call, so concurrent callers only need their own vectors.

    Args:
        config: Default configuration. Loaded from the environment if omitted.
        random_source: Source for weighted selection. Built from
            ``config.random_source_type`` if omitted.
    """

    def __init__(
        self,
        config: SamplerConfig | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self._default_config = config if config is not None else SamplerConfig()
        self._random_source = (
            random_source
            if random_source is not None
            else _build_random_source(self._default_config)
        )
        self._logger = SamplingLogger(self._default_config)
        self._default_config_hash = _config_hash(self._default_config)

        logger.info(
            "LogitSampler initialized: random_source=%s, temperature=%s, selection=%s",
            self._random_source.name,
            self._default_config.temperature,
            self._default_config.selection,
        )

    @property
    def config(self) -> SamplerConfig:
        """The default configuration."""
        return self._default_config

    @property
    def sampling_logger(self) -> SamplingLogger:
        """Logger holding diagnostic records."""
        return self._logger

    def select(
        self,
        logits: ArrayLike,
        overrides: dict[str, Any] | None = None,
    ) -> SelectionResult:
        """Select one token from *logits*.

        Args:
            logits: 1-D scores, one per vocabulary token. Not modified.
            overrides: Per-request settings with ``ls_`` prefix, e.g.
                ``{"ls_temperature": 0.5}``.

        Returns:
            SelectionResult for the chosen token.

        Raises:
            ConfigValidationError: If *overrides* has bad keys.
            InvalidParameterError: If a configured value is out of range.
            TokenSelectionError: If no token can be selected.
        """
        t_start = time.perf_counter()

        config = resolve_config(self._default_config, overrides)
        config_hash = (
            self._default_config_hash if config is self._default_config else _config_hash(config)
        )
        chain = build_samplers(config, self._random_source)
        *filters, terminal = chain

        scores = np.asarray(logits, dtype=np.float64)
        if config.temperature == 0:
            # The pipeline short-circuits to argmax before any filter runs.
            token_id = int(SamplingPipeline(chain).run(scores)[0])
            num_candidates = 1
            greedy = True
        else:
            filtered = SamplingPipeline(filters).run(scores)
            num_candidates = int(np.count_nonzero(~is_excluded(filtered)))
            token_id = int(terminal.sample(filtered)[0])
            greedy = isinstance(terminal, Greedy)

        total_ms = (time.perf_counter() - t_start) * 1000.0
        names = tuple(s.name for s in chain)

        self._logger.log_selection(
            SelectionRecord(
                timestamp_ns=time.time_ns(),
                total_sampling_ms=total_ms,
                random_source_used=self._random_source.name,
                chain=names,
                temperature_used=config.temperature,
                greedy=greedy,
                token_id=token_id,
                num_candidates=num_candidates,
                vocab_size=len(scores),
                config_hash=config_hash,
            ),
            config,
        )

        return SelectionResult(
            token_id=token_id,
            num_candidates=num_candidates,
            greedy=greedy,
            diagnostics={
                "chain": names,
                "total_sampling_ms": total_ms,
                "config_hash": config_hash,
            },
        )

    def close(self) -> None:
        """Release the randomness source."""
        self._random_source.close()

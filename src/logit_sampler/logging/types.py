"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRecord:
    """Immutable record of a single token selection.

    Attributes:
        timestamp_ns: Wall-clock time of selection (nanoseconds since epoch).
        total_sampling_ms: Time spent running the pipeline (milliseconds).
        random_source_used: Name of the randomness source.
        chain: Names of the configured samplers, in run order.
        temperature_used: Configured temperature.
        greedy: True if the zero-temperature short-circuit or the greedy
            selector chose the token.
        token_id: Vocabulary index of the selected token.
        num_candidates: Tokens not excluded by filtering.
        vocab_size: Length of the input score vector.
        config_hash: 16-char SHA-256 prefix of the active config.
    """

    # Timing
    timestamp_ns: int
    total_sampling_ms: float

    # Pipeline
    random_source_used: str
    chain: tuple[str, ...]
    temperature_used: float
    greedy: bool

    # Selection
    token_id: int
    num_candidates: int
    vocab_size: int

    # Config snapshot
    config_hash: str

"""Configuration system for logit-sampler.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (LOGIT_SAMPLER_*) -> .env file -> field defaults.

Per-request overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults. Infrastructure fields are
protected from per-request override.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from logit_sampler.exceptions import ConfigValidationError
from logit_sampler.samplers.registry import SamplerRegistry

if TYPE_CHECKING:
    from logit_sampler.randomness.base import RandomSource
    from logit_sampler.samplers.base import Sampler

# Prefix marking per-request override keys, e.g. {"ls_top_k": 40}.
OVERRIDE_PREFIX = "ls_"

# Fields that can be overridden per request. The randomness source and its
# seed are process-wide and excluded.
_PER_REQUEST_FIELDS: frozenset[str] = frozenset(
    {
        "temperature",
        "top_k",
        "top_p",
        "min_p",
        "selection",
        "log_level",
        "diagnostic_mode",
    }
)

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class SamplerConfig(BaseSettings):
    """Configuration for logit-sampler.

    Resolution order: init kwargs -> env vars (LOGIT_SAMPLER_*) -> .env file -> defaults.

    Filters are disabled by their neutral value: ``top_k <= 0``,
    ``top_p >= 1.0`` and ``min_p <= 0.0``. Range checks on enabled values
    happen when the sampler chain is built.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOGIT_SAMPLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Infrastructure (NOT per-request overridable) ---

    random_source_type: Literal["system", "seeded"] = Field(
        default="system",
        description="Randomness source for weighted selection: 'system' or 'seeded'",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the 'seeded' random source (None = OS seeded)",
    )

    # --- Sampling (per-request overridable) ---

    temperature: float = Field(
        default=1.0,
        description="Sampling temperature in [0, 2]; 0 selects greedily",
    )
    top_k: int = Field(
        default=0,
        description="Top-k filtering (<=0 disables)",
    )
    top_p: float = Field(
        default=1.0,
        description="Nucleus filtering threshold (1.0 disables)",
    )
    min_p: float = Field(
        default=0.0,
        description="Min-p filtering threshold (0.0 disables)",
    )
    selection: Literal["weighted", "greedy"] = Field(
        default="weighted",
        description="Terminal selector: 'weighted' or 'greedy'",
    )

    # --- Logging (per-request overridable) ---

    log_level: Literal["none", "summary", "full"] = Field(
        default="summary",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all selection records in memory for analysis",
    )


_ALL_FIELDS = frozenset(SamplerConfig.model_fields.keys())


def _strip_prefix(key: str) -> str:
    if key.startswith(OVERRIDE_PREFIX):
        return key[len(OVERRIDE_PREFIX) :]
    return key


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate all ``ls_*`` keys in *overrides* without creating a config.

    Args:
        overrides: Per-request arguments, possibly mixed with foreign keys.

    Raises:
        ConfigValidationError: If any ``ls_*`` key is unknown or non-overridable.
    """
    for key in overrides:
        if not key.startswith(OVERRIDE_PREFIX):
            continue
        field_name = _strip_prefix(key)
        if field_name not in _ALL_FIELDS:
            raise ConfigValidationError(
                f"Unknown config field: '{key}' (no field '{field_name}' exists)"
            )
        if field_name not in _PER_REQUEST_FIELDS:
            raise ConfigValidationError(
                f"Field '{field_name}' is an infrastructure field and cannot be "
                f"overridden per-request"
            )


def resolve_config(
    defaults: SamplerConfig,
    overrides: dict[str, Any] | None,
) -> SamplerConfig:
    """Create a new config instance merging defaults with per-request overrides.

    Keys without the ``ls_`` prefix are ignored; they belong to other
    components.

    Args:
        defaults: The base configuration loaded from the environment.
        overrides: Per-request overrides, e.g. ``{"ls_top_k": 40}``.

    Returns:
        A new SamplerConfig with overrides applied, or *defaults* itself
        when there is nothing to apply.

    Raises:
        ConfigValidationError: If any ``ls_*`` key is unknown or non-overridable,
            or a value fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    updates = {
        _strip_prefix(key): value
        for key, value in overrides.items()
        if key.startswith(OVERRIDE_PREFIX)
    }
    if not updates:
        return defaults

    # model_validate coerces types ("40" -> 40); model_copy(update=...) would not.
    merged = defaults.model_dump()
    merged.update(updates)
    try:
        return SamplerConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid per-request override: {exc}") from exc


def build_samplers(config: SamplerConfig, random_source: RandomSource) -> list[Sampler]:
    """Build the canonical chain: temperature, top-k, top-p, min-p, selector.

    Disabled filters are left out of the chain.

    Args:
        config: Resolved configuration.
        random_source: Source injected into the weighted selector.

    Returns:
        Ordered list of constructed samplers.

    Raises:
        InvalidParameterError: If an enabled value is out of range.
    """
    samplers: list[Sampler] = [SamplerRegistry.build("temperature", config.temperature)]
    if config.top_k > 0:
        samplers.append(SamplerRegistry.build("top_k", config.top_k))
    if config.top_p < 1.0:
        samplers.append(SamplerRegistry.build("top_p", config.top_p))
    if config.min_p > 0.0:
        samplers.append(SamplerRegistry.build("min_p", config.min_p))

    if config.selection == "weighted":
        samplers.append(SamplerRegistry.build("weighted", random_source=random_source))
    else:
        samplers.append(SamplerRegistry.build("greedy"))
    return samplers

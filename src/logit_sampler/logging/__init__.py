"""Diagnostic logging subsystem for logit-sampler.

Provides immutable per-token selection records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from logit_sampler.logging.logger import SamplingLogger
from logit_sampler.logging.types import SelectionRecord

__all__ = [
    "SamplingLogger",
    "SelectionRecord",
]

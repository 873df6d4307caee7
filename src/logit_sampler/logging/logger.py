"""Diagnostic logger for per-token selection events.

Uses the standard ``logging`` module with the ``"logit_sampler"`` logger.
Supports three verbosity levels and an in-memory diagnostic mode for
post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logit_sampler.config import SamplerConfig
    from logit_sampler.logging.types import SelectionRecord

logger = logging.getLogger("logit_sampler")


class SamplingLogger:
    """Per-token diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per token with key metrics.

        ``"full"``: Full JSON dump of all record fields.
    """

    def __init__(self, config: SamplerConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[SelectionRecord] = []

    def log_selection(
        self,
        record: SelectionRecord,
        config: SamplerConfig | None = None,
    ) -> None:
        """Log a single selection event.

        Args:
            record: Immutable record of the pipeline run.
            config: Per-request config whose ``log_level`` and
                ``diagnostic_mode`` replace the defaults for this record.
        """
        log_level = config.log_level if config is not None else self._log_level
        diagnostic_mode = (
            config.diagnostic_mode if config is not None else self._diagnostic_mode
        )

        if diagnostic_mode:
            self._records.append(record)

        if log_level == "none":
            return

        if log_level == "summary":
            logger.info(
                "token=%d candidates=%d/%d temp=%.3f%s source=%s total=%.2fms",
                record.token_id,
                record.num_candidates,
                record.vocab_size,
                record.temperature_used,
                " [GREEDY]" if record.greedy else "",
                record.random_source_used,
                record.total_sampling_ms,
            )
        elif log_level == "full":
            logger.info("selection_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[SelectionRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        candidates = [r.num_candidates for r in self._records]
        total_times = [r.total_sampling_ms for r in self._records]
        greedy_count = sum(1 for r in self._records if r.greedy)

        n = len(self._records)
        return {
            "total_tokens": n,
            "mean_candidates": sum(candidates) / n,
            "min_candidates": min(candidates),
            "max_candidates": max(candidates),
            "mean_total_ms": sum(total_times) / n,
            "max_total_ms": max(total_times),
            "greedy_count": greedy_count,
            "greedy_rate": greedy_count / n,
        }

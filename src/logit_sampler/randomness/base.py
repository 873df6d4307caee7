"""Abstract base class for randomness sources.

Weighted selection draws one uniform value per call from a source. The ABC
provides a concrete ``health_check()``; subclasses implement ``name``,
``is_available``, ``random_uniform()`` and ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RandomSource(ABC):
    """Abstract base for all randomness sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'system'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide values."""

    @abstractmethod
    def random_uniform(self) -> float:
        """Return one float drawn uniformly from [0, 1).

        Raises:
            RandomSourceError: If the source cannot provide a value.
        """

    @abstractmethod
    def close(self) -> None:
        """Release resources held by the source."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_available}

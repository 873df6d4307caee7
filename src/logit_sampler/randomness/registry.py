"""Randomness source registry.

Built-in sources are registered at module import time via the
``@register_random_source`` decorator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from logit_sampler.randomness.base import RandomSource


class RandomSourceRegistry:
    """Registry mapping string names to RandomSource classes."""

    _registry: ClassVar[dict[str, type[RandomSource]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[RandomSource]], type[RandomSource]]:
        """Decorator to register a source class under a string key.

        Args:
            name: Unique identifier for the source (e.g., ``'system'``).

        Returns:
            The original class, unmodified.

        Example::

            @RandomSourceRegistry.register("my_source")
            class MySource(RandomSource):
                ...
        """

        def decorator(source_cls: type[RandomSource]) -> type[RandomSource]:
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[RandomSource]:
        """Look up a source class by name.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name in cls._registry:
            return cls._registry[name]
        available = ", ".join(sorted(cls._registry.keys())) or "(none)"
        raise KeyError(f"Unknown random source: {name!r}. Available: {available}")

    @classmethod
    def list_available(cls) -> list[str]:
        """Return all registered source names, sorted."""
        return sorted(cls._registry.keys())


# Convenience alias used as a decorator in source modules.
register_random_source = RandomSourceRegistry.register

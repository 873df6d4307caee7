"""Registry for sampling strategy implementations.

Uses a decorator pattern for registration. The ``build()`` method passes
the strategy's scalar configuration, when it has one, as the sole
positional argument.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from logit_sampler.samplers.base import Sampler


class SamplerRegistry:
    """Registry mapping string names to Sampler classes.

    Built-in strategies register via the ``@SamplerRegistry.register()``
    decorator.
    """

    _registry: ClassVar[dict[str, type[Sampler]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[Sampler]], type[Sampler]]:
        """Decorator that registers a Sampler class under *name*.

        Args:
            name: Identifier used in configuration and diagnostics.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[Sampler]) -> type[Sampler]:
            if name in cls._registry:
                raise ValueError(f"Sampler '{name}' is already registered")
            klass.name = name
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[Sampler]:
        """Return the strategy class registered under *name*.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown sampler '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, name: str, value: Any = None, **kwargs: Any) -> Sampler:
        """Instantiate the strategy registered under *name*.

        Args:
            name: Registered identifier, e.g. ``"top_k"``.
            value: Scalar configuration (temperature, k or p). Omitted for
                strategies without one.
            **kwargs: Extra keyword arguments, e.g. ``random_source``.

        Returns:
            A constructed, validated Sampler.

        Raises:
            KeyError: If *name* is not registered.
            InvalidParameterError: If *value* is out of range.
        """
        klass = cls.get(name)
        if value is None:
            return klass(**kwargs)
        return klass(value, **kwargs)  # type: ignore[call-arg]

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered sampler names."""
        return sorted(cls._registry)

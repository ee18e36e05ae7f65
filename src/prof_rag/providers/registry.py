"""Registry mapping embedding provider types to factories."""

from collections.abc import Callable
from typing import Any

from prof_rag.config.schema import EmbeddingConfig, EmbeddingProviderType
from prof_rag.exceptions import ProviderError, ProviderNotAvailableError
from prof_rag.providers.base import EmbeddingProvider, ProviderType

EmbedderFactory = Callable[..., EmbeddingProvider]
InstanceKey = tuple[ProviderType, tuple[tuple[str, str], ...]]


def _instance_key(provider_type: ProviderType, options: dict[str, Any]) -> InstanceKey:
    return provider_type, tuple(sorted((k, repr(v)) for k, v in options.items()))


class ProviderRegistry:
    """Embedding provider factories plus a memo of built instances.

    Implementations register themselves when ``prof_rag.providers`` is
    imported::

        @ProviderRegistry.register(ProviderType.MOCK)
        def create_mock_provider(dimensions: int = 128, **options):
            return MockEmbeddingProvider(dimensions=dimensions)

    Instances are shared per provider type and option set until
    ``clear_cache()`` is called.
    """

    _factories: dict[ProviderType, EmbedderFactory] = {}
    _instances: dict[InstanceKey, EmbeddingProvider] = {}

    @classmethod
    def register(cls, provider_type: ProviderType) -> Callable[[EmbedderFactory], EmbedderFactory]:
        def decorator(factory: EmbedderFactory) -> EmbedderFactory:
            cls._factories[provider_type] = factory
            return factory

        return decorator

    @classmethod
    def get(
        cls,
        provider_type: ProviderType | str,
        *,
        use_cache: bool = True,
        **options: Any,
    ) -> EmbeddingProvider:
        """Return a provider built with ``options``, reusing a cached one if allowed.

        Raises:
            ProviderNotAvailableError: Unknown or unregistered provider type.
            ProviderError: The factory failed for any other reason.
        """
        try:
            kind = ProviderType(provider_type)
        except ValueError as e:
            raise ProviderNotAvailableError(f"Unknown embedding provider '{provider_type}'") from e

        factory = cls._factories.get(kind)
        if factory is None:
            registered = ", ".join(p.value for p in cls._factories) or "none"
            raise ProviderNotAvailableError(
                f"Embedding provider '{kind.value}' is not registered (registered: {registered})"
            )

        key = _instance_key(kind, options)
        if use_cache and key in cls._instances:
            return cls._instances[key]

        try:
            provider = factory(**options)
        except ProviderError:
            raise
        except Exception as e:
            raise ProviderError(f"Could not create embedding provider '{kind.value}': {e}") from e

        if use_cache:
            cls._instances[key] = provider
        return provider

    @classmethod
    def from_config(cls, config: EmbeddingConfig) -> EmbeddingProvider:
        """Build the provider an ``[embedding]`` config section describes."""
        if config.provider == EmbeddingProviderType.MOCK:
            return cls.get(ProviderType.MOCK, dimensions=config.dimensions)
        return cls.get(
            ProviderType.OPENAI,
            model=config.model,
            api_key=config.api_key,
            dimensions=config.dimensions,
            timeout=config.timeout,
        )

    @classmethod
    def list_available(cls) -> list[ProviderType]:
        return list(cls._factories)

    @classmethod
    def is_registered(cls, provider_type: ProviderType) -> bool:
        return provider_type in cls._factories

    @classmethod
    def clear_cache(cls) -> None:
        """Forget built instances; registrations are kept."""
        cls._instances.clear()

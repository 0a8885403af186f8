"""
Environment Factory

Creates environment providers based on configuration.
"""

from typing import Any, Optional

from envbind.core.exceptions import EnvironmentProviderError
from envbind.core.interfaces.environment import Environment
from envbind.adapters.environment.chain_adapter import ChainEnvironment
from envbind.adapters.environment.mapping_adapter import MappingEnvironment
from envbind.adapters.environment.os_adapter import OSEnvironment
from envbind.adapters.environment.yaml_adapter import YAMLEnvironment


def _layered(path: Optional[str] = None, paths: Optional[list[str]] = None, **kwargs: Any) -> Environment:
    """Process environment first, then the YAML file(s)."""
    return ChainEnvironment([OSEnvironment(), YAMLEnvironment(path=path, paths=paths, **kwargs)])


class EnvironmentFactory:
    """
    Factory for creating environment providers.

    Example:
        ```python
        env = EnvironmentFactory.create("mapping", values={"UID": "50"})

        # Or from config dict
        env = EnvironmentFactory.from_config({
            "provider": "yaml",
            "path": "service.yaml",
        })
        ```
    """

    _providers: dict[str, Any] = {
        "os": OSEnvironment,
        "env": OSEnvironment,
        "mapping": MappingEnvironment,
        "memory": MappingEnvironment,
        "yaml": YAMLEnvironment,
        "layered": _layered,
    }

    @classmethod
    def register(cls, name: str, provider_class: Any) -> None:
        """Register a new provider type (a class or a callable returning an Environment)."""
        cls._providers[name.lower()] = provider_class

    @classmethod
    def create(
        cls,
        provider: str,
        **kwargs: Any,
    ) -> Environment:
        """
        Create an environment provider instance.

        Args:
            provider: Provider name (os, mapping, yaml, layered)
            **kwargs: Provider-specific configuration

        Returns:
            Configured Environment instance
        """
        provider_lower = provider.lower()

        if provider_lower not in cls._providers:
            available = ", ".join(sorted(cls._providers.keys()))
            raise EnvironmentProviderError(
                f"Unknown provider: {provider}. Available: {available}",
                provider=provider,
            )

        return cls._providers[provider_lower](**kwargs)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> Environment:
        """Create a provider from configuration dictionary."""
        config = config.copy()
        provider = config.pop("provider", "os")
        return cls.create(provider, **config)

    @classmethod
    def from_settings(cls) -> Environment:
        """Create the default provider described by ENVBIND_* settings."""
        from envbind.config.settings import get_settings

        try:
            config = get_settings().get_environment_config()
        except ValueError as e:
            raise EnvironmentProviderError(str(e), cause=e) from e
        return cls.from_config(config)

    @classmethod
    def list_providers(cls) -> list[str]:
        """List all registered provider names."""
        return sorted(cls._providers.keys())

"""
Environment Provider Interface

Defines the contract for all key-value sources a Binder reads from
(process environment, in-memory mappings, YAML files, chains of these).
Lookups are exact and case-sensitive.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional


class Environment(ABC):
    """
    Abstract base class for read-only environments.

    A binder treats its environment as read-only for the duration of a
    bind call. Implementations return raw strings; type coercion is the
    binder's job.

    Example:
        ```python
        class DictEnvironment(Environment):
            def __init__(self, values: dict[str, str]):
                self._values = values

            @property
            def provider_name(self) -> str:
                return "dict"

            def lookup(self, key: str) -> Optional[str]:
                return self._values.get(key)

            def keys(self) -> Iterator[str]:
                return iter(self._values)
        ```
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name (e.g. 'os', 'mapping', 'yaml')."""
        pass

    @abstractmethod
    def lookup(self, key: str) -> Optional[str]:
        """
        Look up a key.

        Args:
            key: Exact, case-sensitive key name

        Returns:
            The raw string value, or None if the key is absent
        """
        pass

    @abstractmethod
    def keys(self) -> Iterator[str]:
        """Iterate over the keys currently present."""
        pass

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} provider={self.provider_name}>"

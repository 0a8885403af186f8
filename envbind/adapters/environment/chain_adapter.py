"""
Layered Environment Adapter

Consults several environments in order; the first one holding a key wins.
"""

from typing import Iterator, Optional, Sequence

from envbind.core.interfaces.environment import Environment


class ChainEnvironment(Environment):
    """
    Ordered chain of environments.

    Example:
        ```python
        # Process environment overrides values from the file
        env = ChainEnvironment([OSEnvironment(), YAMLEnvironment("app.yaml")])
        ```
    """

    def __init__(self, environments: Sequence[Environment]):
        self._environments = list(environments)

    @property
    def provider_name(self) -> str:
        return "chain"

    @property
    def environments(self) -> list[Environment]:
        return list(self._environments)

    def lookup(self, key: str) -> Optional[str]:
        for environment in self._environments:
            value = environment.lookup(key)
            if value is not None:
                return value
        return None

    def keys(self) -> Iterator[str]:
        seen: set[str] = set()
        for environment in self._environments:
            for key in environment.keys():
                if key not in seen:
                    seen.add(key)
                    yield key

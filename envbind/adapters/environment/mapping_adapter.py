"""
In-Memory Environment Adapter

An explicit key-value store, useful for deterministic tests and for
programmatic configuration without touching the process environment.
"""

from typing import Iterator, Mapping, Optional

from envbind.core.interfaces.environment import Environment


class MappingEnvironment(Environment):
    """
    Environment backed by a private copy of a mapping.

    Example:
        ```python
        env = MappingEnvironment({"UID": "50"})
        env.set("F1", "field1")
        env.unset("UID")
        ```
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values: dict[str, str] = dict(values or {})

    @property
    def provider_name(self) -> str:
        return "mapping"

    def lookup(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def keys(self) -> Iterator[str]:
        return iter(list(self._values))

    def set(self, key: str, value: str) -> None:
        """Set a key. Values must already be strings."""
        if not isinstance(value, str):
            raise TypeError(f"Environment values must be str, got {type(value).__name__}")
        self._values[key] = value

    def unset(self, key: str) -> None:
        """Remove a key if present."""
        self._values.pop(key, None)

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)

    def __len__(self) -> int:
        return len(self._values)

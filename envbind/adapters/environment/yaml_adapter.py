"""
YAML File Environment Adapter

Loads a YAML document once and serves its flattened keys.
"""

from typing import Iterator, Optional

import yaml

from envbind.config.loader import ConfigLoader
from envbind.core.exceptions import EnvironmentProviderError
from envbind.core.interfaces.environment import Environment
from envbind.observability import get_logger

logger = get_logger(__name__)


class YAMLEnvironment(Environment):
    """
    Environment backed by one or more YAML files.

    Nested mappings are flattened to upper-snake keys, so

        server:
          max_retries: 3

    serves ``SERVER_MAX_RETRIES=3``. ``${VAR}`` and ``${VAR:default}``
    references are substituted from the process environment at load time.
    Later paths override earlier ones.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        paths: Optional[list[str]] = None,
        base_path: Optional[str] = None,
    ):
        if path is None and not paths:
            raise EnvironmentProviderError(
                "YAML environment requires a path",
                provider="yaml",
            )

        self._paths = ([path] if path else []) + list(paths or [])
        self._loader = ConfigLoader(base_path)
        self._values = self._load()

    def _load(self) -> dict[str, str]:
        try:
            if len(self._paths) == 1:
                data = self._loader.load_yaml(self._paths[0])
            else:
                data = self._loader.load_multiple(self._paths)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise EnvironmentProviderError(
                f"Failed to load environment file: {e}",
                provider="yaml",
                cause=e,
            ) from e

        values = self._loader.flatten(data)
        logger.debug("Loaded YAML environment", paths=",".join(self._paths), keys=len(values))
        return values

    @property
    def provider_name(self) -> str:
        return "yaml"

    @property
    def paths(self) -> list[str]:
        return list(self._paths)

    def lookup(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def keys(self) -> Iterator[str]:
        return iter(list(self._values))

    def reload(self) -> None:
        """Re-read the files from disk."""
        self._values = self._load()

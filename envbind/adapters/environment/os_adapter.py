"""
Process Environment Adapter

Reads keys from the live process environment (os.environ).
"""

import os
from typing import Iterator, Mapping, Optional

from envbind.core.interfaces.environment import Environment


class OSEnvironment(Environment):
    """
    Environment backed by the process environment.

    Lookups go straight to ``os.environ`` on every call, so values set
    after construction are visible. A different mapping can be passed for
    isolation, which is how the tests use it.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    @property
    def provider_name(self) -> str:
        return "os"

    def lookup(self, key: str) -> Optional[str]:
        return self._environ.get(key)

    def keys(self) -> Iterator[str]:
        return iter(list(self._environ.keys()))

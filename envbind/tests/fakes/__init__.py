"""
Test Doubles and Sample Structures

A recording environment plus the sample configuration structures used
across the binder tests, enabling deterministic tests without touching
the process environment.

Usage:
    from envbind.tests.fakes import AppConfig, RecordingEnvironment

    env = RecordingEnvironment({"SERVER_PORT": "9090"})
    Binder(env).bind(config := AppConfig())
    assert config.server.port == 9090
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterator, Mapping, Optional

from envbind.binder import Int64
from envbind.core.interfaces.environment import Environment


# =============================================================================
# RECORDING ENVIRONMENT
# =============================================================================

class RecordingEnvironment(Environment):
    """
    In-memory environment that records every lookup.

    Keys can be added and removed between bind calls.
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values: dict[str, str] = dict(values or {})
        self.lookups: list[str] = []

    @property
    def provider_name(self) -> str:
        return "recording"

    def lookup(self, key: str) -> Optional[str]:
        self.lookups.append(key)
        return self._values.get(key)

    def keys(self) -> Iterator[str]:
        return iter(list(self._values))

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def unset(self, key: str) -> None:
        self._values.pop(key, None)

    def reset_lookups(self) -> None:
        self.lookups.clear()


# =============================================================================
# SAMPLE STRUCTURES
# =============================================================================

@dataclass
class TLSConfig:
    """Two levels down from AppConfig."""
    cert_file: str = "/etc/ssl/cert.pem"
    verify: bool = True


@dataclass
class ServerConfig:
    """Nested structure with derived keys."""
    host: str = "localhost"
    port: int = 8080
    max_retries: int = 3
    read_timeout: timedelta = timedelta(seconds=30)
    tls: TLSConfig = field(default_factory=TLSConfig)


@dataclass
class ScalarConfig:
    """One field per supported kind."""
    count: int = 7
    big: Int64 = Int64(1 << 40)
    ratio: float = 0.5
    enabled: bool = False
    name: str = "default"
    interval: timedelta = timedelta(minutes=5)


@dataclass
class AppConfig:
    """Structure exercising nesting, overrides and optional sections."""
    name: str = "app"
    server: ServerConfig = field(default_factory=ServerConfig)
    proxy: Optional[ServerConfig] = None
    debug: bool = False


__all__ = [
    "RecordingEnvironment",
    "TLSConfig",
    "ServerConfig",
    "ScalarConfig",
    "AppConfig",
]

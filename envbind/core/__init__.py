"""
envbind Core Package

This package contains the environment interface and the exception
hierarchy shared by the binder and the adapters.
"""

from envbind.core.interfaces.environment import Environment

from envbind.core.exceptions import (
    EnvBindError,
    ErrorContext,
    InvalidArgumentError,
    UnsupportedTypeError,
    ConversionError,
    RequiredValueMissingError,
    NotAddressableError,
    EnvironmentProviderError,
    wrap_exception,
)

__all__ = [
    # Interfaces
    "Environment",
    # Exceptions
    "EnvBindError",
    "ErrorContext",
    "InvalidArgumentError",
    "UnsupportedTypeError",
    "ConversionError",
    "RequiredValueMissingError",
    "NotAddressableError",
    "EnvironmentProviderError",
    "wrap_exception",
]

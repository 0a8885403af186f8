"""
envbind Package

Binds environment values into typed configuration structures
(dataclasses and pydantic models), with the structure's own values as
defaults.
"""

__version__ = "0.1.0"

from envbind.core import (
    Environment,
    EnvBindError,
    ErrorContext,
    InvalidArgumentError,
    UnsupportedTypeError,
    ConversionError,
    RequiredValueMissingError,
    NotAddressableError,
    EnvironmentProviderError,
)

from envbind.binder import (
    Binder,
    FieldBinding,
    read_defaults,
    setting,
    model_setting,
    Int64,
    Kind,
    hyphenate,
    screaming_snake,
)
from envbind.adapters.environment import (
    OSEnvironment,
    MappingEnvironment,
    YAMLEnvironment,
    ChainEnvironment,
    EnvironmentFactory,
)
from envbind.config import EnvBindSettings, get_settings
from envbind.observability import setup_logging

__all__ = [
    # Version
    "__version__",
    # Binding
    "Binder",
    "FieldBinding",
    "read_defaults",
    "setting",
    "model_setting",
    "Int64",
    "Kind",
    "hyphenate",
    "screaming_snake",
    # Environments
    "Environment",
    "OSEnvironment",
    "MappingEnvironment",
    "YAMLEnvironment",
    "ChainEnvironment",
    "EnvironmentFactory",
    # Errors
    "EnvBindError",
    "ErrorContext",
    "InvalidArgumentError",
    "UnsupportedTypeError",
    "ConversionError",
    "RequiredValueMissingError",
    "NotAddressableError",
    "EnvironmentProviderError",
    # Configuration
    "EnvBindSettings",
    "get_settings",
    "setup_logging",
]

"""
envbind Adapters Package

Concrete environment providers.
"""

from envbind.adapters.environment import (
    OSEnvironment,
    MappingEnvironment,
    YAMLEnvironment,
    ChainEnvironment,
    EnvironmentFactory,
)

__all__ = [
    "OSEnvironment",
    "MappingEnvironment",
    "YAMLEnvironment",
    "ChainEnvironment",
    "EnvironmentFactory",
]

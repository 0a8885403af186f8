"""
Environment Adapters Package

Concrete implementations of the Environment interface
(process environment, in-memory mapping, YAML files, chains).
"""

from envbind.adapters.environment.os_adapter import OSEnvironment
from envbind.adapters.environment.mapping_adapter import MappingEnvironment
from envbind.adapters.environment.yaml_adapter import YAMLEnvironment
from envbind.adapters.environment.chain_adapter import ChainEnvironment
from envbind.adapters.environment.factory import EnvironmentFactory

__all__ = [
    "OSEnvironment",
    "MappingEnvironment",
    "YAMLEnvironment",
    "ChainEnvironment",
    "EnvironmentFactory",
]

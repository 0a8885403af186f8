"""
envbind Core Interfaces

Abstract base classes that all environment adapters implement.
"""

from envbind.core.interfaces.environment import Environment

__all__ = [
    "Environment",
]

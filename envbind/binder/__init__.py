"""
Binder Package

Field walking and value coercion: maps structure fields to environment
keys, parses raw strings into typed values and writes them back.
"""

from envbind.binder.binder import Binder, FieldBinding, read_defaults
from envbind.binder.coercer import Coercer
from envbind.binder.fieldspec import EnvTag, FieldSpec, model_setting, parse_env_tag, setting
from envbind.binder.kinds import Int64, Kind, format_duration, parse_duration
from envbind.binder.naming import hyphenate, screaming_snake
from envbind.binder.walker import StructWalker

__all__ = [
    "Binder",
    "FieldBinding",
    "read_defaults",
    "Coercer",
    "StructWalker",
    "EnvTag",
    "FieldSpec",
    "parse_env_tag",
    "setting",
    "model_setting",
    "Int64",
    "Kind",
    "parse_duration",
    "format_duration",
    "hyphenate",
    "screaming_snake",
]

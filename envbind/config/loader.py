"""
Configuration Loader

Reads YAML key-value files for the YAML environment: ``${VAR}``
substitution, merging of several files and flattening into
environment-style keys.
"""

import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml

from envbind.binder.naming import screaming_snake

_SEPARATOR_PATTERN = re.compile(r"[-.\s]")


def _key_segment(key: Any) -> str:
    """
    Upper-snake form of one mapping key.

    Mixed-case keys are split on case changes the same way derived
    environment keys are (``maxRetries`` -> ``MAX_RETRIES``). Single-case
    keys only have their separators replaced, so ``s3_bucket`` stays
    ``S3_BUCKET`` and can match an explicit ``env`` key.
    """
    text = str(key).strip()
    if any(c.islower() for c in text) and any(c.isupper() for c in text):
        return screaming_snake(text)
    return _SEPARATOR_PATTERN.sub("_", text).upper()


class ConfigLoader:
    """
    Loads YAML files into flat string mappings.

    Example:
        ```python
        loader = ConfigLoader()
        data = loader.load_multiple(["default.yaml", "local.yaml"])

        # {"server": {"max-retries": 3}} -> {"SERVER_MAX_RETRIES": "3"}
        flat = loader.flatten(data)
        ```
    """

    ENV_PATTERN = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')

    def __init__(self, base_path: Optional[str] = None):
        """
        Args:
            base_path: Directory relative paths are resolved against
                (defaults to the working directory)
        """
        self.base_path = Path(base_path) if base_path else Path.cwd()

    def load_yaml(self, path: str) -> dict[str, Any]:
        """
        Read one YAML document.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the top level of the document is not a mapping
        """
        file_path = Path(path)
        if not file_path.is_absolute():
            file_path = self.base_path / file_path

        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")

        text = self.substitute(file_path.read_text())
        data = yaml.safe_load(text) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {file_path}")
        return data

    def load_multiple(self, paths: list[str]) -> dict[str, Any]:
        """Merge several files, later ones winning. Missing files are skipped."""
        merged: dict[str, Any] = {}
        for path in paths:
            try:
                merge_into(merged, self.load_yaml(path))
            except FileNotFoundError:
                continue
        return merged

    def substitute(self, text: str) -> str:
        """
        Replace ``${VAR}`` and ``${VAR:default}`` from the process environment.

        An unset variable without a default becomes the empty string.
        """
        return self.ENV_PATTERN.sub(
            lambda m: os.environ.get(m.group(1), m.group(2) or ""),
            text,
        )

    def flatten(self, data: dict[str, Any], parent: str = "") -> dict[str, str]:
        """
        Flatten nested mappings into upper-snake keys with string values.

        Booleans become "true"/"false", null entries are dropped and lists
        are joined with commas.
        """
        flat: dict[str, str] = {}

        for key, value in data.items():
            segment = _key_segment(key)
            name = f"{parent}_{segment}" if parent else segment
            if isinstance(value, dict):
                flat.update(self.flatten(value, name))
            elif value is not None:
                flat[name] = _stringify(value)

        return flat


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return ",".join(_stringify(item) for item in value)
    return str(value)


def merge_into(target: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``source`` into ``target`` in place and return it."""
    for key, value in source.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merge_into(current, value)
        else:
            target[key] = value
    return target

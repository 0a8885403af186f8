"""
Settings Model

Pydantic-based settings for envbind itself, read from ENVBIND_* variables.
"""

from typing import Any, Optional

from pydantic_settings import BaseSettings


class EnvBindSettings(BaseSettings):
    """
    Library settings.

    Controls which environment a Binder reads from when none is passed
    explicitly, and how setup_logging configures output.

    Example:
        ```python
        settings = get_settings()
        print(settings.environment)        # "os"
        print(settings.environment_file)   # None
        ```
    """

    environment: str = "os"
    environment_file: Optional[str] = None
    log_level: str = "INFO"
    log_format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    model_config = {
        "env_prefix": "ENVBIND_",
        "extra": "ignore",
    }

    def get_environment_config(self) -> dict[str, Any]:
        """Get factory configuration for the default environment."""
        provider = self.environment.lower()

        if provider == "yaml":
            if not self.environment_file:
                raise ValueError("ENVBIND_ENVIRONMENT_FILE is required for the yaml environment")
            return {"provider": "yaml", "path": self.environment_file}
        elif provider == "layered":
            if not self.environment_file:
                return {"provider": "os"}
            return {"provider": "layered", "path": self.environment_file}
        return {"provider": provider}


# Singleton settings instance
_settings: Optional[EnvBindSettings] = None


def get_settings() -> EnvBindSettings:
    """
    Get the settings singleton.

    Returns:
        EnvBindSettings instance
    """
    global _settings

    if _settings is None:
        _settings = EnvBindSettings()

    return _settings


def reset_settings() -> None:
    """Reset settings singleton (for testing)."""
    global _settings
    _settings = None

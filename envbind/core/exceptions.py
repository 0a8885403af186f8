"""
envbind Exception Hierarchy

Provides typed exceptions for configuration binding failures.
All envbind-specific exceptions inherit from EnvBindError.

Exception Hierarchy:
    EnvBindError (base)
    ├── InvalidArgumentError (bind target is not a structure instance)
    ├── UnsupportedTypeError (leaf annotation outside the scalar set)
    ├── ConversionError (raw string could not be parsed)
    ├── RequiredValueMissingError (required field resolved to nothing)
    ├── NotAddressableError (field could not be written)
    └── EnvironmentProviderError (environment could not be created or read)

Usage:
    from envbind.core.exceptions import EnvBindError, RequiredValueMissingError

    try:
        binder.bind(settings)
    except RequiredValueMissingError as e:
        logger.error(f"Missing configuration: {e}")
        sys.exit(1)
    except EnvBindError as e:
        logger.critical(f"Configuration failed: {e}")
        sys.exit(1)
"""

from dataclasses import dataclass, field
from typing import Any, Optional


# ============================================================================
# Base Exception
# ============================================================================

@dataclass
class ErrorContext:
    """
    Additional context for debugging binding errors.

    Attributes:
        field_path: Field names from the bind root down to the failing field
        key: Environment key being resolved when the error occurred
        raw_value: Raw string read from the environment, if any
        metadata: Additional debugging information
    """
    field_path: list[str] = field(default_factory=list)
    key: Optional[str] = None
    raw_value: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def dotted_path(self) -> str:
        return ".".join(self.field_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "field_path": self.dotted_path,
            "key": self.key,
            "raw_value": self.raw_value,
            "metadata": self.metadata,
        }


class EnvBindError(Exception):
    """
    Base exception for all envbind errors.

    Attributes:
        message: Human-readable error message
        context: Field path, key and raw value of the failure
        cause: Original exception that caused this error
    """

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()
        self.cause = cause

    def add_parent(self, field_name: str) -> "EnvBindError":
        """Prepend an enclosing field name to the error's field path."""
        self.context.field_path.insert(0, field_name)
        return self

    @property
    def field_path(self) -> str:
        return self.context.dotted_path

    def __str__(self) -> str:
        parts = [self.message]
        if self.context.field_path:
            parts.append(f"[field={self.context.dotted_path}]")
        if self.context.key is not None:
            parts.append(f"[key={self.context.key}]")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for structured logs."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


# ============================================================================
# Binding Errors
# ============================================================================

class InvalidArgumentError(EnvBindError):
    """
    Raised when the bind root is not a dataclass or pydantic model instance.

    Nothing has been read or written when this is raised.
    """

    def __init__(self, message: str, received_type: Optional[str] = None):
        super().__init__(message)
        self.received_type = received_type


class UnsupportedTypeError(EnvBindError):
    """Raised when a leaf field's annotation is outside the supported scalar set."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(message, context)
        self.type_name = type_name


class ConversionError(EnvBindError):
    """
    Raised when a raw environment string cannot be parsed into the field type.

    Example:
        raise ConversionError(
            "invalid integer literal",
            key="SERVER_PORT",
            raw_value="eighty",
            cause=ValueError(...),
        )
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        raw_value: Optional[str] = None,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
    ):
        context = context or ErrorContext()
        context.key = key if key is not None else context.key
        context.raw_value = raw_value if raw_value is not None else context.raw_value
        super().__init__(message, context, cause)

    @property
    def key(self) -> Optional[str]:
        return self.context.key

    @property
    def raw_value(self) -> Optional[str]:
        return self.context.raw_value


class RequiredValueMissingError(EnvBindError):
    """Raised when a field marked required resolves to no value or an empty string."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        context: Optional[ErrorContext] = None,
    ):
        context = context or ErrorContext()
        context.key = key if key is not None else context.key
        super().__init__(message, context)

    @property
    def key(self) -> Optional[str]:
        return self.context.key


class NotAddressableError(EnvBindError):
    """Raised when a resolved value cannot be written back into its field."""
    pass


class EnvironmentProviderError(EnvBindError):
    """Raised when an environment provider is unknown or its source is unreadable."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause=cause)
        self.provider = provider


# ============================================================================
# Helper Functions
# ============================================================================

def wrap_exception(
    error: Exception,
    message: str,
    error_class: type[EnvBindError] = EnvBindError,
    context: Optional[ErrorContext] = None,
) -> EnvBindError:
    """
    Wrap a standard exception in an envbind exception.

    Args:
        error: Original exception
        message: Human-readable message
        error_class: envbind exception class to use
        context: Additional context

    Returns:
        Wrapped envbind exception
    """
    return error_class(message, context=context, cause=error)


# ============================================================================
# Exports
# ============================================================================

__all__ = [
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

"""
Observability Module

Provides structured logging and bind metrics.

Key features:
- Structured logging with field/key context
- Timing metrics for bind calls
- Counters for environment hits and misses
"""

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


# ============================================================================
# Structured Logging
# ============================================================================

@dataclass
class LogContext:
    """Context attached to log entries."""
    operation: Optional[str] = None
    target: Optional[str] = None
    field_path: Optional[str] = None
    key: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "operation": self.operation,
            "target": self.target,
            "field_path": self.field_path,
            "key": self.key,
        }
        d.update(self.extra)
        return {k: v for k, v in d.items() if v is not None}


class StructuredLogger:
    """
    Logger with structured context.

    Usage:
        log = StructuredLogger("envbind.binder")
        log.debug("Resolved field", field_path="server.port", source="env")
    """

    _CONTEXT_FIELDS = ("operation", "target", "field_path", "key")

    def __init__(self, name: str, context: Optional[LogContext] = None):
        self._logger = logging.getLogger(name)
        self._context = context or LogContext()

    @property
    def name(self) -> str:
        return self._logger.name

    def with_context(self, **kwargs) -> "StructuredLogger":
        """Create logger with additional context."""
        new_context = LogContext(
            operation=kwargs.get("operation", self._context.operation),
            target=kwargs.get("target", self._context.target),
            field_path=kwargs.get("field_path", self._context.field_path),
            key=kwargs.get("key", self._context.key),
            extra={**self._context.extra, **{k: v for k, v in kwargs.items()
                   if k not in self._CONTEXT_FIELDS}},
        )
        return StructuredLogger(self._logger.name, new_context)

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with context."""
        ctx = self._context.to_dict()

        prefix = ""
        if ctx.get("target"):
            prefix = f"[{ctx.pop('target')}] "

        ctx.update({k: v for k, v in kwargs.items() if v is not None})
        if not ctx:
            return f"{prefix}{message}"

        extra_str = " | ".join(f"{k}={v}" for k, v in ctx.items())
        return f"{prefix}{message} | {extra_str}"

    def debug(self, message: str, **kwargs) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(self._format_message(message, **kwargs))

    def info(self, message: str, **kwargs) -> None:
        self._logger.info(self._format_message(message, **kwargs))

    def warning(self, message: str, **kwargs) -> None:
        self._logger.warning(self._format_message(message, **kwargs))

    def error(self, message: str, **kwargs) -> None:
        self._logger.error(self._format_message(message, **kwargs))

    def exception(self, message: str, **kwargs) -> None:
        self._logger.exception(self._format_message(message, **kwargs))


def get_logger(name: str, **context) -> StructuredLogger:
    """Get a structured logger with optional context."""
    return StructuredLogger(name, LogContext(**context))


# ============================================================================
# Timing and Metrics
# ============================================================================

@dataclass
class TimingMetric:
    """A single timing measurement."""
    operation: str
    duration_ms: float
    success: bool = True
    metadata: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)


class MetricsCollector:
    """
    Collects bind timings and counters.

    Binding is synchronous, so no locking is done.
    """

    _instance: Optional["MetricsCollector"] = None

    def __init__(self):
        self._timings: List[TimingMetric] = []
        self._counters: Dict[str, int] = {}
        self._max_timings = 1000

    @classmethod
    def get_instance(cls) -> "MetricsCollector":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = MetricsCollector()
        return cls._instance

    def record_timing(
        self,
        operation: str,
        duration_ms: float,
        success: bool = True,
        **metadata,
    ) -> None:
        """Record a timing metric."""
        self._timings.append(TimingMetric(
            operation=operation,
            duration_ms=duration_ms,
            success=success,
            metadata=metadata,
        ))
        if len(self._timings) > self._max_timings:
            self._timings = self._timings[-self._max_timings:]

    def increment_counter(self, name: str, value: int = 1) -> None:
        """Increment a counter."""
        self._counters[name] = self._counters.get(name, 0) + value

    def get_counter(self, name: str) -> int:
        """Get counter value."""
        return self._counters.get(name, 0)

    def get_timing_stats(self, operation: Optional[str] = None, last_n: int = 100) -> Dict[str, Any]:
        """Get timing statistics."""
        filtered = self._timings[-last_n:]
        if operation:
            filtered = [t for t in filtered if t.operation == operation]

        if not filtered:
            return {"count": 0, "avg_ms": 0, "min_ms": 0, "max_ms": 0, "success_rate": 0}

        durations = [t.duration_ms for t in filtered]
        return {
            "count": len(durations),
            "avg_ms": sum(durations) / len(durations),
            "min_ms": min(durations),
            "max_ms": max(durations),
            "success_rate": sum(1 for t in filtered if t.success) / len(filtered),
        }

    def get_all_metrics(self) -> Dict[str, Any]:
        """Get all collected metrics."""
        return {
            "counters": dict(self._counters),
            "timing_stats": self.get_timing_stats(),
        }

    def reset(self) -> None:
        """Reset all metrics."""
        self._timings.clear()
        self._counters.clear()


# Global metrics collector
metrics = MetricsCollector.get_instance()

METRIC_NAMES = {
    "bind_duration": "bind.duration_ms",
    "bind_calls": "bind.calls",
    "bind_failures": "bind.failures",
    "env_hits": "bind.env.hits",
    "env_misses": "bind.env.misses",
}


@contextmanager
def timed_operation_sync(
    operation: str,
    log: bool = True,
    **metadata,
):
    """
    Context manager for timing synchronous operations.

    Usage:
        with timed_operation_sync("bind", target="AppConfig"):
            binder.bind(config)
    """
    start_time = time.perf_counter()
    success = True

    try:
        yield
    except Exception:
        success = False
        raise
    finally:
        duration_ms = (time.perf_counter() - start_time) * 1000
        metrics.record_timing(
            operation=operation,
            duration_ms=duration_ms,
            success=success,
            **metadata,
        )

        if log:
            log_msg = f"Operation {operation} completed in {duration_ms:.2f}ms"
            if success:
                logger.debug(log_msg)
            else:
                logger.warning(f"{log_msg} (failed)")


def setup_logging(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
) -> None:
    """
    Setup logging configuration for applications using envbind.

    Falls back to ENVBIND_LOG_LEVEL / ENVBIND_LOG_FORMAT when arguments
    are omitted. Call this at application startup.
    """
    from envbind.config.settings import get_settings

    settings = get_settings()
    if level is None:
        level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=format_string or settings.log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

"""
Leaf Field Coercion

Resolves one scalar field: derives its environment key, reads the raw
value, converts it to the field's kind, enforces "required" and writes
the result back onto the instance.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from envbind.binder.fieldspec import EnvTag, FieldSpec
from envbind.binder.kinds import Kind, ResolvedType, parse_value, resolve_kind, type_name
from envbind.core.exceptions import (
    ConversionError,
    ErrorContext,
    NotAddressableError,
    RequiredValueMissingError,
    UnsupportedTypeError,
)
from envbind.core.interfaces.environment import Environment
from envbind.observability import METRIC_NAMES, MetricsCollector, get_logger, metrics

logger = get_logger(__name__)


@dataclass
class Resolution:
    """Outcome of resolving one leaf field."""
    flag_name: str
    tag: EnvTag
    resolved: ResolvedType
    value: Any
    source: str


class Coercer:
    """
    Produces the final value of one leaf field.

    The steps run in a fixed order: flag name, environment key, current
    value as default, environment lookup and parse, required check, write.
    """

    def __init__(
        self,
        environment: Environment,
        collector: Optional[MetricsCollector] = None,
    ):
        self._environment = environment
        self._metrics = collector or metrics

    def resolve_type(self, spec: FieldSpec) -> ResolvedType:
        resolved = resolve_kind(spec.annotation)
        if resolved is None:
            name = type_name(spec.annotation)
            raise UnsupportedTypeError(
                f"unsupported field type {name}",
                type_name=name,
                context=ErrorContext(field_path=[spec.name]),
            )
        return resolved

    def resolve(self, target: Any, spec: FieldSpec, prefix: str) -> Resolution:
        """Compute the final value of a field without writing it."""
        flag_name = spec.flag_name(prefix)
        tag = spec.env_tag(prefix)
        resolved = self.resolve_type(spec)

        value = getattr(target, spec.name)
        source = "default"

        if not tag.suppressed:
            raw = self._environment.lookup(tag.key)
            if raw is None:
                self._metrics.increment_counter(METRIC_NAMES["env_misses"])
            else:
                self._metrics.increment_counter(METRIC_NAMES["env_hits"])
                value = self._parse(resolved.kind, raw, tag.key, spec)
                source = "env"

        if tag.required and value is None:
            raise RequiredValueMissingError(
                f"environment {tag.key} is required",
                key=tag.key,
                context=ErrorContext(field_path=[spec.name]),
            )

        if tag.required and resolved.kind is Kind.STRING and value == "":
            # empty strings never satisfy "required"
            raise RequiredValueMissingError(
                f"environment {tag.key} is required and must not be empty",
                key=tag.key,
                context=ErrorContext(field_path=[spec.name], metadata={"empty": True}),
            )

        return Resolution(flag_name=flag_name, tag=tag, resolved=resolved, value=value, source=source)

    def coerce(self, target: Any, spec: FieldSpec, prefix: str, path: tuple[str, ...] = ()) -> None:
        """Resolve a field and write the result onto ``target``."""
        resolution = self.resolve(target, spec, prefix)
        self._write(target, spec, resolution.value)

        logger.debug(
            "Resolved field",
            field_path=".".join(path + (spec.name,)),
            flag=resolution.flag_name,
            key=None if resolution.tag.suppressed else resolution.tag.key,
            source=resolution.source,
        )

    def _parse(self, kind: Kind, raw: str, key: str, spec: FieldSpec) -> Any:
        try:
            return parse_value(kind, raw)
        except ValueError as e:
            raise ConversionError(
                f"cannot convert {key}={raw!r} to {kind.value}: {e}",
                key=key,
                raw_value=raw,
                context=ErrorContext(field_path=[spec.name]),
                cause=e,
            ) from e

    def _write(self, target: Any, spec: FieldSpec, value: Any) -> None:
        try:
            setattr(target, spec.name, value)
        except (AttributeError, ValidationError) as e:
            raise NotAddressableError(
                f"unable to address field {spec.name}",
                context=ErrorContext(field_path=[spec.name]),
                cause=e,
            ) from e

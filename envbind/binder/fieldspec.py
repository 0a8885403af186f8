"""
Field Metadata

Reads the per-field ``flag`` and ``env`` metadata from dataclass fields
and pydantic model fields, and derives flag-style names and environment
keys from it.

Metadata format:
    flag: naming override. "-" ignores the field. "" on a nested
          structure drops the prefix for its fields.
    env:  "<KEY|->[,option]*". "-" disables the environment lookup.
          The only recognized option is "required".
"""

import dataclasses
import typing
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from pydantic import BaseModel, Field

from envbind.binder.naming import hyphenate, screaming_snake

FLAG_KEY = "flag"
ENV_KEY = "env"
IGNORE = "-"
REQUIRED_OPTION = "required"


@dataclass(frozen=True)
class EnvTag:
    """Parsed ``env`` metadata for one field."""
    key: str
    required: bool = False
    suppressed: bool = False
    explicit: bool = False
    options: tuple[str, ...] = ()


@dataclass(frozen=True)
class FieldSpec:
    """
    Description of one field of a bind target.

    Attributes:
        name: Attribute name on the instance
        annotation: Resolved type annotation
        flag: Naming override, or None when absent
        env: Raw env tag, or None when absent
    """
    name: str
    annotation: Any
    flag: Optional[str] = None
    env: Optional[str] = None

    @property
    def ignored(self) -> bool:
        return self.flag == IGNORE

    @property
    def resets_prefix(self) -> bool:
        """An explicitly empty flag on a nested structure."""
        return self.flag == ""

    def flag_name(self, prefix: str) -> str:
        """Flag-style name: hyphenated prefix plus the override or the hyphenated field name."""
        if self.flag:
            return hyphenate(prefix) + self.flag
        return hyphenate(prefix) + hyphenate(self.name)

    def child_prefix(self, prefix: str) -> str:
        """Prefix handed to the fields of a nested structure."""
        if self.resets_prefix:
            return ""
        return self.flag_name(prefix) + "-"

    def env_tag(self, prefix: str) -> EnvTag:
        """Resolve the environment key and options for this field."""
        if self.env is None:
            return EnvTag(key=screaming_snake(self.flag_name(prefix)))
        return parse_env_tag(self.env)


def parse_env_tag(tag: str) -> EnvTag:
    """
    Parse an ``env`` tag of the form ``KEY[,option...]``.

    >>> parse_env_tag("NEED_IT,required")
    EnvTag(key='NEED_IT', required=True, suppressed=False, explicit=True, options=('required',))
    """
    key, *options = tag.split(",")
    return EnvTag(
        key=key,
        required=REQUIRED_OPTION in options,
        suppressed=key == IGNORE,
        explicit=True,
        options=tuple(options),
    )


# ============================================================================
# Field Discovery
# ============================================================================

def _dataclass_specs(target: Any) -> Iterator[FieldSpec]:
    cls = type(target)
    try:
        hints = typing.get_type_hints(cls)
    except NameError:
        # unresolvable forward reference; fall back to raw annotations
        hints = {}

    for f in dataclasses.fields(target):
        yield FieldSpec(
            name=f.name,
            annotation=hints.get(f.name, f.type),
            flag=f.metadata.get(FLAG_KEY),
            env=f.metadata.get(ENV_KEY),
        )


def _model_specs(target: BaseModel) -> Iterator[FieldSpec]:
    for name, info in type(target).model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        yield FieldSpec(
            name=name,
            annotation=info.annotation,
            flag=extra.get(FLAG_KEY),
            env=extra.get(ENV_KEY),
        )


def iter_field_specs(target: Any) -> Iterator[FieldSpec]:
    """
    Yield a FieldSpec for every public field of a dataclass or model instance.

    Fields whose names start with an underscore are skipped, the same way
    they would be left out of serialization.
    """
    if isinstance(target, BaseModel):
        specs = _model_specs(target)
    else:
        specs = _dataclass_specs(target)

    for spec in specs:
        if spec.name.startswith("_"):
            continue
        yield spec


# ============================================================================
# Declaration Helpers
# ============================================================================

def _metadata(env: Optional[str], flag: Optional[str]) -> dict[str, str]:
    metadata = {}
    if env is not None:
        metadata[ENV_KEY] = env
    if flag is not None:
        metadata[FLAG_KEY] = flag
    return metadata


def setting(
    default: Any = dataclasses.MISSING,
    *,
    env: Optional[str] = None,
    flag: Optional[str] = None,
    default_factory: Any = dataclasses.MISSING,
    **kwargs: Any,
) -> Any:
    """
    Declare a dataclass field with binding metadata.

    Example:
        ```python
        @dataclass
        class Config:
            uid: int = setting(0, env="UID")
            token: str = setting("", env="API_TOKEN,required")
            server: ServerConfig = setting(default_factory=ServerConfig, flag="")
        ```
    """
    metadata = {**kwargs.pop("metadata", {}), **_metadata(env, flag)}
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata=metadata,
        **kwargs,
    )


def model_setting(
    default: Any = ...,
    *,
    env: Optional[str] = None,
    flag: Optional[str] = None,
    **kwargs: Any,
) -> Any:
    """Declare a pydantic model field with binding metadata."""
    extra = kwargs.pop("json_schema_extra", None) or {}
    if default is not ...:
        kwargs["default"] = default
    return Field(json_schema_extra={**extra, **_metadata(env, flag)}, **kwargs)

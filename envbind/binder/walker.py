"""
Structure Traversal

Depth-first walk over a dataclass or pydantic model instance, computing
the name prefix for nested structures and handing every leaf field to a
visitor.
"""

from typing import Any, Callable

from envbind.binder.fieldspec import FieldSpec, iter_field_specs
from envbind.binder.kinds import is_structure, is_structure_type
from envbind.core.exceptions import EnvBindError, ErrorContext, InvalidArgumentError, NotAddressableError

# (owner instance, field spec, name prefix, attribute path of the owner)
LeafVisitor = Callable[[Any, FieldSpec, str, tuple[str, ...]], None]


class StructWalker:
    """
    Walks a structure and dispatches its leaf fields.

    Nested structures are recursed into with the prefix
    ``hyphenate(prefix) + name + "-"`` (or "" when their flag is
    explicitly empty). Optional nested structures that are currently None
    are skipped. The walk stops at the first error; fields visited before
    it keep their new values.
    """

    def __init__(self, visit_leaf: LeafVisitor):
        self._visit_leaf = visit_leaf

    def walk(self, target: Any, prefix: str = "") -> None:
        if not is_structure(target):
            if isinstance(target, type):
                received = f"type[{target.__name__}]"
            else:
                received = type(target).__name__
            raise InvalidArgumentError(
                f"argument is not a dataclass or model instance: {received}",
                received_type=received,
            )
        self._walk(target, prefix, ())

    def _walk(self, target: Any, prefix: str, path: tuple[str, ...]) -> None:
        for spec in iter_field_specs(target):
            if spec.ignored:
                continue

            try:
                value = getattr(target, spec.name)
            except AttributeError as e:
                # e.g. a field(init=False) that was never assigned
                raise NotAddressableError(
                    f"unable to read field {spec.name}",
                    context=ErrorContext(field_path=[spec.name]),
                    cause=e,
                ) from e

            if value is None and is_structure_type(spec.annotation):
                continue

            if is_structure(value):
                try:
                    self._walk(value, spec.child_prefix(prefix), path + (spec.name,))
                except EnvBindError as e:
                    e.add_parent(spec.name)
                    raise
                continue

            self._visit_leaf(target, spec, prefix, path)

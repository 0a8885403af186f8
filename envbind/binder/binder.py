"""
Binder

Entry point that populates a configuration structure from an
environment, falling back to the values already on the structure.
"""

from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from envbind.binder.coercer import Coercer
from envbind.binder.fieldspec import FieldSpec
from envbind.binder.kinds import Kind
from envbind.binder.walker import StructWalker
from envbind.core.exceptions import EnvBindError
from envbind.core.interfaces.environment import Environment
from envbind.observability import METRIC_NAMES, get_logger, metrics, timed_operation_sync

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class FieldBinding:
    """
    How one leaf field maps to the environment.

    Attributes:
        path: Dotted attribute path from the bind root
        flag_name: Hyphenated flag-style name
        env_key: Environment key, or None when the lookup is disabled
        kind: Scalar kind of the field
        required: Whether the field must resolve to a value
    """
    path: str
    flag_name: str
    env_key: Optional[str]
    kind: Kind
    required: bool = False

    @property
    def suppressed(self) -> bool:
        return self.env_key is None


class Binder:
    """
    Binds environment values into dataclass or pydantic model instances.

    Example:
        ```python
        @dataclass
        class ServerConfig:
            host: str = "localhost"
            max_retries: int = 3

        @dataclass
        class AppConfig:
            server: ServerConfig = field(default_factory=ServerConfig)
            token: str = setting("", env="API_TOKEN,required")

        config = Binder().bind(AppConfig())
        # SERVER_HOST, SERVER_MAX_RETRIES and API_TOKEN were consulted
        ```
    """

    def __init__(self, environment: Optional[Environment] = None):
        if environment is None:
            from envbind.adapters.environment.factory import EnvironmentFactory

            environment = EnvironmentFactory.from_settings()
        self._environment = environment
        self._coercer = Coercer(environment)

    @property
    def environment(self) -> Environment:
        return self._environment

    def bind(self, target: T) -> T:
        """
        Populate ``target`` in place and return it.

        Raises:
            InvalidArgumentError: target is not a dataclass or model instance
            UnsupportedTypeError: a leaf field has an unsupported annotation
            ConversionError: an environment value could not be parsed
            RequiredValueMissingError: a required field resolved to nothing
            NotAddressableError: a field could not be written
        """
        target_name = type(target).__name__
        metrics.increment_counter(METRIC_NAMES["bind_calls"])

        try:
            with timed_operation_sync("bind", target=target_name):
                StructWalker(self._coercer.coerce).walk(target)
        except EnvBindError as e:
            metrics.increment_counter(METRIC_NAMES["bind_failures"])
            logger.warning(
                "Bind failed",
                target=target_name,
                error=e.__class__.__name__,
                field_path=e.field_path or None,
                key=e.context.key,
            )
            raise

        logger.debug("Bind complete", target=target_name, environment=self._environment.provider_name)
        return target

    def describe(self, target: Any) -> list[FieldBinding]:
        """
        List the leaf fields of ``target`` with their names and keys.

        Nothing is read from the environment and nothing is written.
        Optional nested structures that are None are not listed.
        """
        bindings: list[FieldBinding] = []

        def collect(owner: Any, spec: FieldSpec, prefix: str, path: tuple[str, ...]) -> None:
            tag = spec.env_tag(prefix)
            bindings.append(FieldBinding(
                path=".".join(path + (spec.name,)),
                flag_name=spec.flag_name(prefix),
                env_key=None if tag.suppressed else tag.key,
                kind=self._coercer.resolve_type(spec).kind,
                required=tag.required,
            ))

        StructWalker(collect).walk(target)
        return bindings


def read_defaults(target: T, environment: Optional[Environment] = None) -> T:
    """
    Fill ``target`` from the environment where values are set.

    Shorthand for ``Binder(environment).bind(target)``.
    """
    return Binder(environment).bind(target)

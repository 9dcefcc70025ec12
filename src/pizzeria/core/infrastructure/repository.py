from uuid import UUID
from typing import (
    TypeVar,
    Generic,
    Optional,
    Callable,
    Awaitable,
    get_origin,
    get_args,
)

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from pizzeria.core.ioc import container

T = TypeVar("T")

tracer = trace.get_tracer(__name__)


class Delegate(Generic[T]):
    """Marker for an operation delegated to the concrete repository."""

    def __init__(self, name: Optional[str] = None):
        self.name = name


def invoke(name: Optional[str] = None) -> Delegate:
    return Delegate(name)


class RepoMeta(type):
    """
    Replaces every ``Delegate`` attribute with an async method that forwards
    the call to the same-named method of the concrete repository, inside a
    span named ``infrastructure.repository.<operation>``.
    """

    def __new__(cls, name, bases, dct):
        for attr_name, value in list(dct.items()):
            if isinstance(value, Delegate):
                dct[attr_name] = cls._create_async_method(value.name or attr_name)
        return super().__new__(cls, name, bases, dct)

    @staticmethod
    def _create_async_method(operation):
        async def async_method(self, *args, **kwargs):
            with tracer.start_as_current_span(
                f"infrastructure.repository.{operation}",
                kind=trace.SpanKind.INTERNAL,
            ) as span:
                span.set_attribute("repository.operation", operation)
                span.set_attribute("repository.class", type(self).__name__)
                span.set_attribute("repository.concrete_type", type(self._repo).__name__)
                if args and getattr(args[0], "id", None) is not None:
                    span.set_attribute("repository.entity_type", type(args[0]).__name__)
                    span.set_attribute("repository.entity_id", str(args[0].id))

                target = getattr(self._repo, operation, None)
                if not callable(target):
                    raise AttributeError(
                        f"'{operation}' is not callable on {type(self._repo).__name__}"
                    )
                try:
                    result = await target(*args, **kwargs)
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, f"Repository {operation} failed: {e}"))
                    span.set_attribute("repository.operation.error_type", type(e).__name__)
                    raise

                span.set_status(Status(StatusCode.OK))
                return result

        async_method.__name__ = operation
        return async_method


class Add(Generic[T], metaclass=RepoMeta):
    create: Callable[[T], Awaitable[None]] = invoke()


class Get(Generic[T], metaclass=RepoMeta):
    get: Callable[[UUID, Optional[str]], Awaitable[T]] = invoke()


class Update(Get[T], metaclass=RepoMeta):
    update: Callable[[T], Awaitable[None]] = invoke()


class Remove(Get[T], metaclass=RepoMeta):
    delete: Callable[[T], Awaitable[None]] = invoke()


class Query(Generic[T], metaclass=RepoMeta):
    query: Callable[[Optional[str], int, int], Awaitable[list[T]]] = invoke()


class AbstractRepository(Generic[T]):
    """
    Base of the feature-local repositories. The concrete repository is taken
    from the generic parameter and resolved from the container on first use:

        class Repository(AbstractRepository[IngredientRepository], Get[Ingredient]): ...
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        concrete_type = None
        for base in cls.__mro__:
            for orig in getattr(base, "__orig_bases__", ()):
                if get_origin(orig) is AbstractRepository:
                    args = get_args(orig)
                    if args:
                        concrete_type = args[0]
                        break
            if concrete_type is not None:
                break

        if concrete_type is None:
            raise ValueError(
                f"Could not determine concrete repository type for {cls.__name__}. "
                f"Declare the class as: class {cls.__name__}(AbstractRepository[YourConcreteRepo], ...)"
            )

        cls._concrete_repo_type = concrete_type

    @property
    def _repo(self):
        if not hasattr(self, "_cached_repo"):
            self._cached_repo = container.get(self._concrete_repo_type)
        return self._cached_repo

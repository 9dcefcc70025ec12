from typing import Type, Callable, Optional, get_origin, get_args, TypeVar, Union, overload
from enum import Enum
from pizzeria.core.context import context

T = TypeVar("T")


class ProviderType(Enum):
    SINGLETON = "singleton"
    FACTORY = "factory"
    RESOURCE = "resource"
    OBJECT = "object"
    LIST = "list"


def get_component_key(cls: Type) -> str:
    """
    Builds the container attribute name for a type.

    ``List[Base]`` keys are prefixed with ``List_`` so the list of every
    registered ``Base`` subclass can live next to ``Base`` itself.

    Raises:
        ValueError: when a ``List`` annotation has no type argument.
    """
    if hasattr(cls, "__origin__") and get_origin(cls) is list:
        args = get_args(cls)
        if args:
            base_type = args[0]
            return f"List_{base_type.__module__}_{base_type.__name__}".replace(".", "_")
        raise ValueError(f"List type must have arguments: {cls}")

    return f"{cls.__module__}.{cls.__name__}".replace(".", "_")


@overload
def component(_cls: Type[T]) -> Type[T]: ...


@overload
def component(
    _cls: None = None,
    *,
    provider_type: ProviderType = ProviderType.SINGLETON,
    factory: Optional[Callable] = None,
    value: Optional[object] = None,
) -> Callable[[Type[T]], Type[T]]: ...


@overload
def component(
    _cls: Type[T],
    *,
    provider_type: ProviderType = ProviderType.SINGLETON,
    factory: Optional[Callable] = None,
    value: Optional[object] = None,
) -> Type[T]: ...


def component(
    _cls: Optional[Type[T]] = None,
    *,
    provider_type: ProviderType = ProviderType.SINGLETON,
    factory: Optional[Callable] = None,
    value: Optional[object] = None,
) -> Union[Type[T], Callable[[Type[T]], Type[T]]]:
    """
    Registers a component in the IoC registry. Works as a decorator or as a
    plain call:

        @component
        class Service: ...

        @component(provider_type=ProviderType.FACTORY)
        class Principal: ...

        component(List[CommandPipeLine], provider_type=ProviderType.LIST)
        component(Context, provider_type=ProviderType.OBJECT, value=context)
        component(DatabaseLifetime, provider_type=ProviderType.RESOURCE, factory=open_database)

    ``factory`` replaces the class as the provider's callable; its annotated
    parameters are resolved like constructor parameters.

    Raises:
        ValueError: on a duplicated key or an inconsistent combination of
            ``provider_type``, ``factory`` and ``value``.
    """
    component_registry = context.component_registry

    def register_component(target_cls: Type[T]) -> Type[T]:
        key = get_component_key(target_cls)

        if key in component_registry:
            raise ValueError(f"Duplicated component: {key}")

        if provider_type in (ProviderType.SINGLETON, ProviderType.FACTORY, ProviderType.RESOURCE) and value is not None:
            raise ValueError(
                f"'value' is not valid for provider_type={provider_type.value} in {key}"
            )

        if provider_type == ProviderType.RESOURCE and factory is None:
            raise ValueError(f"provider_type=resource requires a 'factory' in {key}")

        if provider_type == ProviderType.LIST and (factory is not None or value is not None):
            raise ValueError(
                f"'factory' and 'value' are not valid for provider_type=list in {key}"
            )

        component_registry[key] = {
            "cls": factory if factory is not None else target_cls,
            "provider_type": provider_type,
            "provider": None,
            "value": value if provider_type == ProviderType.OBJECT and value is not None else target_cls,
        }

        return target_cls

    if _cls is not None:
        return register_component(_cls)

    return register_component

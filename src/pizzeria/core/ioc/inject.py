from typing import Callable, TypeVar
from dependency_injector.wiring import inject as _inject
from pizzeria.core.context import context

F = TypeVar("F", bound=Callable[..., object])


def inject(func: F) -> F:
    # remember the module so AppBuilder wires it
    context.modules.add(func.__module__)
    return _inject(func)

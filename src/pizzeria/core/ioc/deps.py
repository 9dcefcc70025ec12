from dependency_injector.wiring import Provide
from typing import Type, TypeVar, TYPE_CHECKING
from pizzeria.core.ioc.component import get_component_key

T = TypeVar("T")

if TYPE_CHECKING:
    # type checkers see the resolved instance
    def deps(cls: Type[T]) -> T: ...
else:
    from fastapi import Depends

    def deps(cls: Type[T]) -> T:
        return Depends(Provide[get_component_key(cls)])

from typing import List, Optional
from fastapi import Query as QueryParam
from pydantic import Field

from pizzeria.core.ioc import component, deps, inject
from pizzeria.core.infrastructure import AbstractRepository, Query
from pizzeria.core.mediator import Mediator, Command, CommandHandler
from pizzeria.core.server import build_router
from pizzeria.domain import Pizza
from pizzeria.features.pizzas.models import Response, to_response
from pizzeria.infrastructure import PizzaRepository

router = build_router("pizzas")


class Request(Command):
    name: Optional[str] = None
    page: int = Field(0, ge=0)
    size: int = Field(10, ge=1, le=100)


@component
class Repository(AbstractRepository[PizzaRepository], Query[Pizza]): ...


@component
class Service(CommandHandler[Request]):

    def __init__(self, repository: Repository):
        self._repository = repository

    async def handler(self, query: Request) -> List[Response]:
        pizzas = await self._repository.query(query.name, query.page, query.size)
        return [to_response(p) for p in pizzas]


@router.get("", summary="Query pizzas by name")
@inject
async def controller(
    name: Optional[str] = None,
    page: int = QueryParam(0, ge=0),
    size: int = QueryParam(10, ge=1, le=100),
    mediator: Mediator = deps(Mediator),
) -> List[Response]:
    return await mediator.send(Request(name=name, page=page, size=size))

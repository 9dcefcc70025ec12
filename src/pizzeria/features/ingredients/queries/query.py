from typing import List, Optional
from fastapi import Query as QueryParam
from pydantic import Field

from pizzeria.core.ioc import component, deps, inject
from pizzeria.core.infrastructure import AbstractRepository, Query
from pizzeria.core.mediator import Mediator, Command, CommandHandler
from pizzeria.core.openapi import FeatureModel, Money
from pizzeria.core.server import build_router
from pizzeria.core.util import ID
from pizzeria.domain import Ingredient
from pizzeria.infrastructure import IngredientRepository

router = build_router("ingredients")


class Request(Command):
    name: Optional[str] = None
    page: int = Field(0, ge=0)
    size: int = Field(10, ge=1, le=100)


class Response(FeatureModel):
    id: ID
    name: str
    cost: Money


@component
class Repository(AbstractRepository[IngredientRepository], Query[Ingredient]): ...


@component
class Service(CommandHandler[Request]):

    def __init__(self, repository: Repository):
        self._repository = repository

    async def handler(self, query: Request) -> List[Response]:
        ingredients = await self._repository.query(query.name, query.page, query.size)
        return [Response(id=i.id, name=i.name, cost=i.cost) for i in ingredients]


@router.get("", summary="Query ingredients by name")
@inject
async def controller(
    name: Optional[str] = None,
    page: int = QueryParam(0, ge=0),
    size: int = QueryParam(10, ge=1, le=100),
    mediator: Mediator = deps(Mediator),
) -> List[Response]:
    return await mediator.send(Request(name=name, page=page, size=size))

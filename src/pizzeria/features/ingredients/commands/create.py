from decimal import Decimal
from pydantic import Field

from pizzeria.core.ioc import component, deps, inject
from pizzeria.core.infrastructure import AbstractRepository, Add
from pizzeria.core.mediator import Mediator, Command, CommandHandler
from pizzeria.core.openapi import FeatureModel, Money
from pizzeria.core.server import build_router
from pizzeria.core.util import ID, get_id
from pizzeria.domain import Ingredient
from pizzeria.infrastructure import IngredientRepository

router = build_router("ingredients")


class Request(Command):
    name: str = Field(min_length=1, max_length=255)
    cost: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class Response(FeatureModel):
    id: ID
    name: str
    cost: Money


@component
class Repository(AbstractRepository[IngredientRepository], Add[Ingredient]): ...


@component
class Service(CommandHandler[Request]):

    def __init__(self, repository: Repository):
        self._repository = repository

    async def handler(self, req: Request) -> Response:
        ingredient = Ingredient.create(get_id(), req.name, req.cost)
        await self._repository.create(ingredient)
        return Response(id=ingredient.id, name=ingredient.name, cost=ingredient.cost)


@router.post("", status_code=201, summary="Create ingredient")
@inject
async def controller(req: Request, mediator: Mediator = deps(Mediator)) -> Response:
    return await mediator.send(req)

from decimal import Decimal
from pydantic import Field

from pizzeria.core.ioc import component, deps, inject
from pizzeria.core.infrastructure import AbstractRepository, Update
from pizzeria.core.mediator import Mediator, Command, CommandHandler
from pizzeria.core.openapi import FeatureModel, build_error_responses
from pizzeria.core.server import build_router, no_content
from pizzeria.core.util import ID
from pizzeria.domain import Ingredient
from pizzeria.infrastructure import IngredientRepository

router = build_router("ingredients")


class Body(FeatureModel):
    name: str = Field(min_length=1, max_length=255)
    cost: Decimal = Field(ge=0, max_digits=10, decimal_places=2)


class Request(Command):
    id: ID
    name: str
    cost: Decimal


@component
class Repository(AbstractRepository[IngredientRepository], Update[Ingredient]): ...


@component
class Service(CommandHandler[Request]):

    def __init__(self, repository: Repository):
        self._repository = repository

    async def handler(self, command: Request) -> None:
        ingredient = await self._repository.get(command.id)
        ingredient.update(command.name, command.cost)
        await self._repository.update(ingredient)


@router.put(
    "/{id}", status_code=204, summary="Update ingredient", responses=build_error_responses(404)
)
@inject
async def controller(id: ID, body: Body, mediator: Mediator = deps(Mediator)):
    await mediator.send(Request(id=id, name=body.name, cost=body.cost))
    return no_content()

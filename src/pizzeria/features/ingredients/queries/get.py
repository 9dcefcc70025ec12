from pizzeria.core.ioc import component, deps, inject
from pizzeria.core.infrastructure import AbstractRepository, Get
from pizzeria.core.mediator import Mediator, Command, CommandHandler
from pizzeria.core.openapi import FeatureModel, Money, build_error_responses
from pizzeria.core.server import build_router
from pizzeria.core.util import ID
from pizzeria.domain import Ingredient
from pizzeria.infrastructure import IngredientRepository

router = build_router("ingredients")


class Request(Command):
    id: ID


class Response(FeatureModel):
    id: ID
    name: str
    cost: Money


@component
class Repository(AbstractRepository[IngredientRepository], Get[Ingredient]): ...


@component
class Service(CommandHandler[Request]):

    def __init__(self, repository: Repository):
        self._repository = repository

    async def handler(self, query: Request) -> Response:
        ingredient = await self._repository.get(query.id)
        return Response(id=ingredient.id, name=ingredient.name, cost=ingredient.cost)


@router.get("/{id}", summary="Get ingredient", responses=build_error_responses(404))
@inject
async def controller(id: ID, mediator: Mediator = deps(Mediator)) -> Response:
    return await mediator.send(Request(id=id))

from typing import List
from pydantic import Field

from pizzeria.core.ioc import component, deps, inject
from pizzeria.core.infrastructure import AbstractRepository, Add, Get
from pizzeria.core.mediator import Mediator, Command, CommandHandler
from pizzeria.core.openapi import build_error_responses
from pizzeria.core.server import build_router
from pizzeria.core.util import ID, get_id
from pizzeria.domain import Ingredient, Pizza
from pizzeria.features.pizzas.models import Response, to_response
from pizzeria.infrastructure import IngredientRepository, PizzaRepository

router = build_router("pizzas")


class Request(Command):
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    url: str = Field("", max_length=2048)
    ingredients: List[ID] = Field(default_factory=list)


@component
class Repository(AbstractRepository[PizzaRepository], Add[Pizza]): ...


@component
class Ingredients(AbstractRepository[IngredientRepository], Get[Ingredient]): ...


@component
class Service(CommandHandler[Request]):

    def __init__(self, repository: Repository, ingredients: Ingredients):
        self._repository = repository
        self._ingredients = ingredients

    async def handler(self, req: Request) -> Response:
        ingredients = [
            await self._ingredients.get(id) for id in dict.fromkeys(req.ingredients)
        ]
        pizza = Pizza.create(get_id(), req.name, req.description, req.url, ingredients)
        await self._repository.create(pizza)
        return to_response(pizza)


@router.post(
    "", status_code=201, summary="Create pizza", responses=build_error_responses(404)
)
@inject
async def controller(req: Request, mediator: Mediator = deps(Mediator)) -> Response:
    return await mediator.send(req)

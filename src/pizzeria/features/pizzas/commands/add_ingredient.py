from pizzeria.core.ioc import component, deps, inject
from pizzeria.core.infrastructure import AbstractRepository, Get, Update
from pizzeria.core.mediator import Mediator, Command, CommandHandler
from pizzeria.core.openapi import build_error_responses
from pizzeria.core.server import build_router, no_content
from pizzeria.core.util import ID
from pizzeria.domain import Ingredient, Pizza
from pizzeria.infrastructure import IngredientRepository, PizzaRepository

router = build_router("pizzas")


class Request(Command):
    id: ID
    ingredient_id: ID


@component
class Repository(AbstractRepository[PizzaRepository], Update[Pizza]): ...


@component
class Ingredients(AbstractRepository[IngredientRepository], Get[Ingredient]): ...


@component
class Service(CommandHandler[Request]):

    def __init__(self, repository: Repository, ingredients: Ingredients):
        self._repository = repository
        self._ingredients = ingredients

    async def handler(self, command: Request) -> None:
        pizza = await self._repository.get(command.id)
        ingredient = await self._ingredients.get(command.ingredient_id)
        pizza.add_ingredient(ingredient)
        await self._repository.update(pizza)


@router.put(
    "/{id}/ingredients/{ingredient_id}",
    status_code=204,
    summary="Add ingredient to pizza",
    responses=build_error_responses(404),
)
@inject
async def controller(id: ID, ingredient_id: ID, mediator: Mediator = deps(Mediator)):
    await mediator.send(Request(id=id, ingredient_id=ingredient_id))
    return no_content()

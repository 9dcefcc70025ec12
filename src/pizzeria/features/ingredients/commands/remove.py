from pizzeria.core.exceptions import ConflictDomainException
from pizzeria.core.ioc import component, deps, inject
from pizzeria.core.infrastructure import AbstractRepository, RepoMeta, Remove, invoke
from pizzeria.core.mediator import Mediator, Command, CommandHandler
from pizzeria.core.openapi import build_error_responses
from pizzeria.core.server import build_router, no_content
from pizzeria.core.util import ID
from pizzeria.domain import Ingredient
from pizzeria.infrastructure import IngredientRepository, PizzaRepository

router = build_router("ingredients")


class Request(Command):
    id: ID


@component
class Repository(AbstractRepository[IngredientRepository], Remove[Ingredient]): ...


@component
class Pizzas(AbstractRepository[PizzaRepository], metaclass=RepoMeta):
    uses_ingredient = invoke()


@component
class Service(CommandHandler[Request]):

    def __init__(self, repository: Repository, pizzas: Pizzas):
        self._repository = repository
        self._pizzas = pizzas

    async def handler(self, command: Request) -> None:
        ingredient = await self._repository.get(command.id)

        if await self._pizzas.uses_ingredient(ingredient.id):
            raise ConflictDomainException(
                f"Ingredient {ingredient.id} is used by at least one pizza"
            )

        await self._repository.delete(ingredient)


@router.delete(
    "/{id}", status_code=204, summary="Remove ingredient", responses=build_error_responses(404, 409)
)
@inject
async def controller(id: ID, mediator: Mediator = deps(Mediator)):
    await mediator.send(Request(id=id))
    return no_content()

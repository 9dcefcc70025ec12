from pizzeria.core.ioc import component, deps, inject
from pizzeria.core.infrastructure import AbstractRepository, Remove
from pizzeria.core.mediator import Mediator, Command, CommandHandler
from pizzeria.core.openapi import build_error_responses
from pizzeria.core.server import build_router, no_content
from pizzeria.core.util import ID
from pizzeria.domain import Pizza
from pizzeria.infrastructure import PizzaRepository

router = build_router("pizzas")


class Request(Command):
    id: ID


@component
class Repository(AbstractRepository[PizzaRepository], Remove[Pizza]): ...


@component
class Service(CommandHandler[Request]):

    def __init__(self, repository: Repository):
        self._repository = repository

    async def handler(self, command: Request) -> None:
        pizza = await self._repository.get(command.id)
        await self._repository.delete(pizza)


@router.delete(
    "/{id}", status_code=204, summary="Remove pizza", responses=build_error_responses(404)
)
@inject
async def controller(id: ID, mediator: Mediator = deps(Mediator)):
    await mediator.send(Request(id=id))
    return no_content()

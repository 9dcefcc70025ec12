from pizzeria.core.ioc import component, deps, inject
from pizzeria.core.infrastructure import AbstractRepository, Get
from pizzeria.core.mediator import Mediator, Command, CommandHandler
from pizzeria.core.openapi import build_error_responses
from pizzeria.core.server import build_router
from pizzeria.core.util import ID
from pizzeria.domain import Pizza
from pizzeria.features.pizzas.models import Response, to_response
from pizzeria.infrastructure import PizzaRepository

router = build_router("pizzas")


class Request(Command):
    id: ID


@component
class Repository(AbstractRepository[PizzaRepository], Get[Pizza]): ...


@component
class Service(CommandHandler[Request]):

    def __init__(self, repository: Repository):
        self._repository = repository

    async def handler(self, query: Request) -> Response:
        return to_response(await self._repository.get(query.id))


@router.get("/{id}", summary="Get pizza", responses=build_error_responses(404))
@inject
async def controller(id: ID, mediator: Mediator = deps(Mediator)) -> Response:
    return await mediator.send(Request(id=id))

from pydantic import Field

from pizzeria.core.ioc import component, deps, inject
from pizzeria.core.infrastructure import AbstractRepository, Update
from pizzeria.core.mediator import Mediator, Command, CommandHandler
from pizzeria.core.openapi import FeatureModel, build_error_responses
from pizzeria.core.server import build_router, no_content
from pizzeria.core.util import ID
from pizzeria.domain import Pizza
from pizzeria.infrastructure import PizzaRepository

router = build_router("pizzas")


class Body(FeatureModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    url: str = Field("", max_length=2048)


class Request(Command):
    id: ID
    name: str
    description: str
    url: str


@component
class Repository(AbstractRepository[PizzaRepository], Update[Pizza]): ...


@component
class Service(CommandHandler[Request]):

    def __init__(self, repository: Repository):
        self._repository = repository

    async def handler(self, command: Request) -> None:
        pizza = await self._repository.get(command.id)
        pizza.update(command.name, command.description, command.url)
        await self._repository.update(pizza)


@router.put(
    "/{id}", status_code=204, summary="Update pizza", responses=build_error_responses(404)
)
@inject
async def controller(id: ID, body: Body, mediator: Mediator = deps(Mediator)):
    await mediator.send(
        Request(id=id, name=body.name, description=body.description, url=body.url)
    )
    return no_content()

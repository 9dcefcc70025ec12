import asyncio

import pytest

from pizzeria.core.context import context
from pizzeria.core.mediator import (
    Command,
    CommandHandler,
    CommandPipeLine,
    DuplicateCommandError,
    Mediator,
    ordered,
)


class Greet(Command):
    name: str


class Orphan(Command):
    pass


calls = []


class GreetHandler(CommandHandler[Greet]):
    async def handler(self, command: Greet) -> str:
        calls.append("handler")
        return f"hello {command.name}"


@ordered(20)
class Inner(CommandPipeLine):
    async def handler(self, ctx, next_handler):
        calls.append("inner")
        return await next_handler()


@ordered(1)
class Outer(CommandPipeLine):
    async def handler(self, ctx, next_handler):
        calls.append(f"outer {ctx.command.name}")
        return await next_handler()


@pytest.fixture
def mediator():
    calls.clear()
    return Mediator([GreetHandler()], [Inner(), Outer()], context)


def test_handler_is_registered_for_its_command():
    assert context.commands[Greet] is GreetHandler


def test_pipelines_run_by_order(mediator):
    assert asyncio.run(mediator.send(Greet(name="ana"))) == "hello ana"
    assert calls == ["outer ana", "inner", "handler"]


def test_handler_is_reused_between_sends(mediator):
    asyncio.run(mediator.send(Greet(name="ana")))
    asyncio.run(mediator.send(Greet(name="luis")))
    assert calls.count("handler") == 2
    assert "outer luis" in calls


def test_without_pipelines():
    calls.clear()
    mediator = Mediator([GreetHandler()], [], context)
    assert asyncio.run(mediator.send(Greet(name="ana"))) == "hello ana"
    assert calls == ["handler"]


def test_command_without_handler(mediator):
    with pytest.raises(ValueError):
        asyncio.run(mediator.send(Orphan()))


def test_second_handler_for_a_command_is_rejected():
    with pytest.raises(DuplicateCommandError):

        class Another(CommandHandler[Greet]):
            async def handler(self, command: Greet) -> None: ...

from abc import ABC, ABCMeta, abstractmethod
from functools import partial
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, Type, TypeVar, get_args

from pizzeria.core.context import Context, context
from pizzeria.core.ioc import ProviderType, component
from pizzeria.core.openapi import FeatureModel


class Command(FeatureModel):
    pass


T = TypeVar("T", bound=Command)

Next = Callable[[], Awaitable[Any]]


class DuplicateCommandError(Exception):
    def __init__(self, command: Type[Command], current: Type, duplicate: Type):
        super().__init__(
            f"{duplicate.__name__} cannot handle {command.__name__}: "
            f"it is already handled by {current.__name__}"
        )


class CommandHandlerMeta(ABCMeta):
    """Registers every ``CommandHandler[X]`` subclass as the handler of ``X``."""

    def __new__(mcs, name, bases, namespace, **kwargs):
        handler_type = super().__new__(mcs, name, bases, namespace)
        if bases and name != "CommandHandler":
            command = mcs._handled_command(handler_type)
            if command is not None:
                mcs._register(command, handler_type)
        return handler_type

    @staticmethod
    def _handled_command(handler_type) -> Optional[Type[Command]]:
        for base in getattr(handler_type, "__orig_bases__", ()):
            command = next(
                (a for a in get_args(base) if isinstance(a, type) and issubclass(a, Command)),
                None,
            )
            if command is not None:
                return command
        return None

    @staticmethod
    def _register(command: Type[Command], handler_type: Type) -> None:
        current = context.commands.setdefault(command, handler_type)
        if current is not handler_type:
            raise DuplicateCommandError(command, current, handler_type)


class CommandHandler(Generic[T], metaclass=CommandHandlerMeta):
    @abstractmethod
    async def handler(self, command: T) -> Any:
        pass


class PipelineContext:
    """State shared by the pipelines of one ``send``."""

    def __init__(self, command: Command):
        self.command = command


def ordered(order: int):
    def decorator(cls):
        cls.order = order
        return cls

    return decorator


class CommandPipeLine(ABC):
    order: int = 0

    @abstractmethod
    async def handler(self, context: PipelineContext, next_handler: Next) -> Any:
        pass


class Route:
    """Resolved handler and pipelines of one command type."""

    def __init__(self, handler: CommandHandler, pipes: List[CommandPipeLine]):
        self.handler = handler
        self.pipes = pipes

    async def _call_handler(self, ctx: PipelineContext) -> Any:
        return await self.handler.handler(ctx.command)

    @staticmethod
    async def _call_pipe(pipe: CommandPipeLine, ctx: PipelineContext, next_handler: Next) -> Any:
        return await pipe.handler(ctx, next_handler)

    def chain(self, ctx: PipelineContext) -> Next:
        # the first pipe is the outermost
        next_handler = partial(self._call_handler, ctx)
        for pipe in reversed(self.pipes):
            next_handler = partial(self._call_pipe, pipe, ctx, next_handler)
        return next_handler


@component
class Mediator:
    def __init__(
        self,
        commands_handlers: List[CommandHandler],
        pipelines: List[CommandPipeLine],
        context: Context,
    ):
        self._handlers = {type(h): h for h in commands_handlers}
        self._pipelines = sorted(pipelines or [], key=lambda p: type(p).order)
        self._context = context
        self._routes: Dict[Type[Command], Route] = {}

    async def send(self, command: Command):
        route = self._routes.get(type(command))
        if route is None:
            route = self._routes[type(command)] = self._route(type(command))
        return await route.chain(PipelineContext(command))()

    def _route(self, command_type: Type[Command]) -> Route:
        handler_type = self._context.commands.get(command_type)
        if handler_type is None:
            raise ValueError(f"{command_type} has no registered command handler")

        handler = self._handlers.get(handler_type)
        if handler is None:
            raise ValueError(f"No instance found for handler {handler_type}")

        return Route(handler, self._pipelines)


component(List[CommandPipeLine], provider_type=ProviderType.LIST)
component(List[CommandHandler], provider_type=ProviderType.LIST)
component(Context, provider_type=ProviderType.OBJECT, value=context)

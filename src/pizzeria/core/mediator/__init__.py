from ._mediator import (
    Command,
    CommandHandler,
    CommandPipeLine,
    DuplicateCommandError,
    Mediator,
    PipelineContext,
    ordered,
)
from ._pipelines import LoggerPipeLine


__all__ = [
    "Command",
    "CommandHandler",
    "CommandPipeLine",
    "DuplicateCommandError",
    "LoggerPipeLine",
    "Mediator",
    "PipelineContext",
    "ordered",
]

import time
import structlog
from typing import Callable, Any, Awaitable
from pizzeria.core.ioc import component
from ._mediator import CommandPipeLine, PipelineContext, ordered

logger = structlog.get_logger(__name__)


@component
@ordered(5)
class LoggerPipeLine(CommandPipeLine):

    async def handler(
        self, context: PipelineContext, next_handler: Callable[[], Awaitable[Any]]
    ) -> Any:
        command = type(context.command).__name__
        start = time.perf_counter()
        try:
            result = await next_handler()
        except Exception as e:
            logger.warning(
                "command_failed",
                command=command,
                error=type(e).__name__,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise
        logger.info(
            "command_handled",
            command=command,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return result

from contextvars import ContextVar
from typing import Any, Awaitable, Callable, NewType, Optional

import structlog
from opentelemetry import trace
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from pizzeria.core.config import Config
from pizzeria.core.exceptions import DataBaseException
from pizzeria.core.ioc import component, ProviderType
from pizzeria.core.mediator import CommandPipeLine, PipelineContext, ordered
from .tables import metadata

tracer = trace.get_tracer(__name__)
logger = structlog.get_logger(__name__)

context_session: ContextVar[Optional[AsyncSession]] = ContextVar(
    "current_session", default=None
)


def get_current_session() -> AsyncSession:
    session = context_session.get()
    if session is None:
        raise DataBaseException("No active session, commands must run through TransactionPipeLine")
    return session


def _is_memory_database(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


@component
class Database:
    """Owns the engine and the session factory of the configured database."""

    def __init__(self, config: Config):
        self._config = config.env.database
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DataBaseException("Database is not connected")
        return self._engine

    async def connect(self) -> None:
        url = self._config.url
        options: dict[str, Any] = {"echo": self._config.echo}
        if _is_memory_database(url):
            # a single shared connection keeps the in-memory schema alive
            options.update(poolclass=StaticPool, connect_args={"check_same_thread": False})

        self._engine = create_async_engine(url, **options)
        async with self._engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

        self._session_factory = async_sessionmaker(
            self._engine, expire_on_commit=False, autoflush=False
        )
        logger.info("database_connected", backend=make_url(url).get_backend_name())

    async def disconnect(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("database_disconnected")
        self._engine = None
        self._session_factory = None

    def session(self) -> AsyncSession:
        if self._session_factory is None:
            raise DataBaseException("Database is not connected")
        return self._session_factory()


DatabaseLifetime = NewType("DatabaseLifetime", Database)


async def _database_lifetime(database: Database):
    await database.connect()
    try:
        yield database
    finally:
        await database.disconnect()


component(DatabaseLifetime, provider_type=ProviderType.RESOURCE, factory=_database_lifetime)


@component
@ordered(10)
class TransactionPipeLine(CommandPipeLine):
    """One session and one transaction per command."""

    def __init__(self, database: Database):
        self._database = database

    async def handler(
        self, context: PipelineContext, next_handler: Callable[[], Awaitable[Any]]
    ) -> Any:
        with tracer.start_as_current_span("infrastructure.database.transaction") as span:
            span.set_attribute("command", type(context.command).__name__)
            async with self._database.session() as session:
                token = context_session.set(session)
                try:
                    result = await next_handler()
                    await session.commit()
                    return result
                except SQLAlchemyError as e:
                    await session.rollback()
                    span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
                    raise DataBaseException(str(e), cause=e) from e
                except Exception:
                    await session.rollback()
                    raise
                finally:
                    context_session.reset(token)

from typing import Generic, List, Optional, TypeVar, get_args, get_origin

import structlog
from sqlalchemy import Table, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from pizzeria.core.exceptions import NotFoundDomainException
from pizzeria.core.util import ID
from .database import get_current_session

T = TypeVar("T")

logger = structlog.get_logger(__name__)


class RepositorySqlAlchemy(Generic[T]):
    """
    Store for one mapped aggregate type, working on the session opened by
    ``TransactionPipeLine`` for the running command.
    """

    _entity_type: type

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for base in getattr(cls, "__orig_bases__", ()):
            if get_origin(base) is RepositorySqlAlchemy:
                args = get_args(base)
                if args:
                    cls._entity_type = args[0]
                    break

    @property
    def _session(self) -> AsyncSession:
        return get_current_session()

    @property
    def _table(self) -> Table:
        return inspect(self._entity_type).local_table

    async def create(self, entity: T) -> None:
        self._session.add(entity)
        await self._session.flush()
        logger.debug("entity_created", entity=self._entity_type.__name__, id=str(entity.id))

    async def get(self, id: ID, message: Optional[str] = None) -> T:
        entity = await self._session.get(self._entity_type, id)
        if entity is None:
            raise NotFoundDomainException(
                message or f"{self._entity_type.__name__} {id} does not exist"
            )
        return entity

    async def update(self, entity: T) -> None:
        self._session.add(entity)
        await self._session.flush()
        logger.debug("entity_updated", entity=self._entity_type.__name__, id=str(entity.id))

    async def delete(self, entity: T) -> None:
        await self._session.delete(entity)
        await self._session.flush()
        logger.debug("entity_deleted", entity=self._entity_type.__name__, id=str(entity.id))

    async def query(self, name: Optional[str], page: int, size: int) -> List[T]:
        """Entities whose name contains ``name`` (any case), one page at a time."""
        table = self._table
        stmt = select(self._entity_type)
        if name:
            stmt = stmt.where(table.c.name.icontains(name, autoescape=True))
        stmt = stmt.order_by(table.c.name, table.c.id).offset(page * size).limit(size)
        result = await self._session.scalars(stmt)
        return list(result.all())

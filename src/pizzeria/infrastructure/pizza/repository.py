from sqlalchemy import select

from pizzeria.core.ioc import component
from pizzeria.core.util import ID
from pizzeria.domain import Pizza
from pizzeria.infrastructure.sql import RepositorySqlAlchemy
from pizzeria.infrastructure.tables import pizza_ingredients


@component
class Repository(RepositorySqlAlchemy[Pizza]):

    async def uses_ingredient(self, ingredient_id: ID) -> bool:
        stmt = (
            select(pizza_ingredients.c.pizza_id)
            .where(pizza_ingredients.c.ingredient_id == ingredient_id)
            .limit(1)
        )
        return (await self._session.scalar(stmt)) is not None

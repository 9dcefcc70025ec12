from decimal import Decimal
from pizzeria.core.domain import BaseEntity
from pizzeria.core.util import ID


class Ingredient(BaseEntity):
    def __init__(self, id: ID, name: str, cost: Decimal):
        super().__init__(id)
        self._name = name
        self._cost = cost

    @property
    def name(self) -> str:
        return self._name

    @property
    def cost(self) -> Decimal:
        return self._cost

    def update(self, name: str, cost: Decimal) -> None:
        self._name = name
        self._cost = cost

    @staticmethod
    def create(id: ID, name: str, cost: Decimal) -> "Ingredient":
        return Ingredient(id=id, name=name, cost=cost)

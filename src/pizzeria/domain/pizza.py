from decimal import Decimal
from typing import ClassVar, Iterable, Set
from pizzeria.core.domain import BaseEntity
from pizzeria.core.util import ID
from .ingredient import Ingredient

DEFAULT_MARGIN = Decimal("1.2")


class Pizza(BaseEntity):
    """
    A pizza owns a set of ingredients and derives its price from them:
    ``sum(cost) * margin``, computed on every read.
    """

    margin: ClassVar[Decimal] = DEFAULT_MARGIN

    def __init__(
        self,
        id: ID,
        name: str,
        description: str,
        url: str,
        ingredients: Iterable[Ingredient],
    ):
        super().__init__(id)
        self._name = name
        self._description = description
        self._url = url
        self._ingredients: Set[Ingredient] = set(ingredients)

    @classmethod
    def use_margin(cls, margin: Decimal) -> None:
        cls.margin = Decimal(margin)

    @property
    def price(self) -> Decimal:
        return sum((i.cost for i in self._ingredients), Decimal(0)) * self.margin

    @property
    def ingredients(self) -> Set[Ingredient]:
        return set(self._ingredients)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def url(self) -> str:
        return self._url

    def add_ingredient(self, ingredient: Ingredient) -> None:
        self._ingredients.add(ingredient)

    def remove_ingredient(self, ingredient: Ingredient) -> None:
        self._ingredients.discard(ingredient)

    def update(self, name: str, description: str, url: str) -> None:
        self._name = name
        self._description = description
        self._url = url

    @classmethod
    def create(
        cls,
        id: ID,
        name: str,
        description: str,
        url: str,
        ingredients: Iterable[Ingredient],
    ) -> "Pizza":
        return cls(
            id=id,
            name=name,
            description=description,
            url=url,
            ingredients=ingredients,
        )

from typing import List

from pizzeria.core.openapi import FeatureModel, Money
from pizzeria.core.util import ID
from pizzeria.domain import Pizza


class IngredientResponse(FeatureModel):
    id: ID
    name: str
    cost: Money


class Response(FeatureModel):
    id: ID
    name: str
    description: str
    url: str
    price: Money
    ingredients: List[IngredientResponse]


def to_response(pizza: Pizza) -> Response:
    ingredients = sorted(pizza.ingredients, key=lambda i: (i.name, str(i.id)))
    return Response(
        id=pizza.id,
        name=pizza.name,
        description=pizza.description,
        url=pizza.url,
        price=pizza.price,
        ingredients=[
            IngredientResponse(id=i.id, name=i.name, cost=i.cost) for i in ingredients
        ],
    )

from decimal import Decimal

from pizzeria.core.util import get_id
from pizzeria.domain import Ingredient


def test_create_keeps_values():
    id = get_id()
    ingredient = Ingredient.create(id, "tomato", Decimal("1.5"))
    assert ingredient.id == id
    assert ingredient.name == "tomato"
    assert ingredient.cost == Decimal("1.5")


def test_update_replaces_name_and_cost():
    ingredient = Ingredient.create(get_id(), "tomato", Decimal("1.5"))
    ingredient.update("cherry tomato", Decimal("2"))
    assert ingredient.name == "cherry tomato"
    assert ingredient.cost == Decimal("2")


def test_update_keeps_identity():
    id = get_id()
    ingredient = Ingredient.create(id, "tomato", Decimal("1.5"))
    before = Ingredient.create(id, "tomato", Decimal("1.5"))
    ingredient.update("basil", Decimal("0.3"))
    assert ingredient == before

from sqlalchemy import Column, ForeignKey, MetaData, Numeric, String, Table, Text, Uuid
from sqlalchemy.orm import registry, relationship

from pizzeria.domain import Ingredient, Pizza

metadata = MetaData()
mapper_registry = registry(metadata=metadata)

ingredients = Table(
    "ingredients",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("name", String(255), nullable=False, index=True),
    Column("cost", Numeric(10, 2, asdecimal=True), nullable=False),
)

pizzas = Table(
    "pizzas",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("name", String(255), nullable=False, index=True),
    Column("description", Text, nullable=False, default=""),
    Column("url", String(2048), nullable=False, default=""),
)

pizza_ingredients = Table(
    "pizza_ingredients",
    metadata,
    Column("pizza_id", Uuid, ForeignKey("pizzas.id"), primary_key=True),
    Column("ingredient_id", Uuid, ForeignKey("ingredients.id"), primary_key=True),
)

# the aggregates are mapped as they are, without ORM base classes
mapper_registry.map_imperatively(
    Ingredient,
    ingredients,
    properties={
        "_id": ingredients.c.id,
        "_name": ingredients.c.name,
        "_cost": ingredients.c.cost,
    },
)

mapper_registry.map_imperatively(
    Pizza,
    pizzas,
    properties={
        "_id": pizzas.c.id,
        "_name": pizzas.c.name,
        "_description": pizzas.c.description,
        "_url": pizzas.c.url,
        "_ingredients": relationship(
            Ingredient,
            secondary=pizza_ingredients,
            collection_class=set,
            lazy="selectin",
        ),
    },
)

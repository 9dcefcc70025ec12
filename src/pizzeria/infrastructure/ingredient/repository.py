from pizzeria.core.ioc import component
from pizzeria.domain import Ingredient
from pizzeria.infrastructure.sql import RepositorySqlAlchemy


@component
class Repository(RepositorySqlAlchemy[Ingredient]): ...

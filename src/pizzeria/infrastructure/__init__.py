from . import tables
from .database import Database, TransactionPipeLine, get_current_session
from .ingredient import IngredientRepository
from .pizza import PizzaRepository

__all__ = [
    "Database",
    "IngredientRepository",
    "PizzaRepository",
    "TransactionPipeLine",
    "get_current_session",
    "tables",
]

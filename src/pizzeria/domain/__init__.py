from .ingredient import Ingredient
from .pizza import Pizza, DEFAULT_MARGIN

__all__ = ["Ingredient", "Pizza", "DEFAULT_MARGIN"]

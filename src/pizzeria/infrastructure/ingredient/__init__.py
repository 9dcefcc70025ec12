from .repository import Repository as IngredientRepository

__all__ = ["IngredientRepository"]

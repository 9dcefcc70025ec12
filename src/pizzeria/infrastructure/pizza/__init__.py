from .repository import Repository as PizzaRepository

__all__ = ["PizzaRepository"]

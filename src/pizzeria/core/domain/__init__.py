__all__ = [
    "BaseEntity",
    "Identifiable",
]

from .baseentity import BaseEntity, Identifiable

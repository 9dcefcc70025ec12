from .repository import (
    AbstractRepository,
    Add,
    Delegate,
    Get,
    Query,
    RepoMeta,
    Remove,
    Update,
    invoke,
)

__all__ = [
    "AbstractRepository",
    "Add",
    "Delegate",
    "Get",
    "Query",
    "RepoMeta",
    "Remove",
    "Update",
    "invoke",
]

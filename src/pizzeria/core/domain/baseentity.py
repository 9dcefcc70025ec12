from typing import Optional, Protocol, runtime_checkable
from pizzeria.core.util import ID


@runtime_checkable
class Identifiable(Protocol):
    @property
    def id(self) -> Optional[ID]: ...


class BaseEntity:
    """
    Identity for aggregates. Equality and hash depend only on ``id``; an
    entity built without an id is transient and equal to nothing.
    """

    def __init__(self, id: Optional[ID] = None):
        self._id = id

    @property
    def id(self) -> Optional[ID]:
        return self._id

    def __eq__(self, value):
        return (
            self.id is not None
            and isinstance(value, Identifiable)
            and self.id == value.id
        )

    def __hash__(self):
        return hash(self.id)

from uuid import UUID, uuid4
from typing import TypeAlias

ID: TypeAlias = UUID


def get_id() -> ID:
    return uuid4()

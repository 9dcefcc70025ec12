from datetime import datetime, timezone
from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")


class ErrorResponse(BaseModel):
    """Body of every error answer except the empty 404."""

    timestamp: str = Field(default_factory=_timestamp)
    status: int
    error: str
    exception: Optional[str] = None
    message: Union[str, List[Any]]
    path: str

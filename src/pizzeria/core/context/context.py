from pydantic import BaseModel, Field
from typing import Dict, Any, Type


class Context(BaseModel):
    """Process-wide registries filled while feature modules are imported."""

    component_registry: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    modules: set[str] = Field(default_factory=set)
    commands: Dict[Type[Any], Type] = Field(default_factory=dict)


context = Context()

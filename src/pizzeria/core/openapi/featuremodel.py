from decimal import Decimal
from typing import Annotated, ClassVar, FrozenSet
from pydantic import BaseModel, PlainSerializer, SerializerFunctionWrapHandler, model_serializer

# money is computed as Decimal and rendered as a JSON number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


def _pascal(part: str) -> str:
    return "".join(word.capitalize() for word in part.split("_"))


class FeatureModel(BaseModel):
    """
    Base of the request and response shapes of the features. The schema name
    is prefixed with the feature path, so
    ``pizzeria.features.ingredients.commands.create.Request`` is published
    as ``IngredientsCreateRequest``.
    """

    _skipped_parts: ClassVar[FrozenSet[str]] = frozenset({"commands", "queries", "models"})

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        parts = cls.__module__.split(".")
        if "features" in parts:
            parts = parts[parts.index("features") + 1:]
        prefix = "".join(_pascal(p) for p in parts if p not in cls._skipped_parts)
        cls.__name__ = f"{prefix}{cls.__name__}"

    @model_serializer(mode="wrap")
    def _drop_none(self, serializer: SerializerFunctionWrapHandler):
        data = serializer(self)
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

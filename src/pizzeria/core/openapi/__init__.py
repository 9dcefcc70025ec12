from .featuremodel import FeatureModel, Money
from .build_error_responses import build_error_responses

__all__ = [
    "build_error_responses",
    "FeatureModel",
    "Money",
]
